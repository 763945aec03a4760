"""API request models."""

from pydantic import BaseModel, Field
from typing import Any, Optional, Union


# Values arrive as typed by the user: text, numbers, or null
RawFields = dict[str, Optional[Union[float, str]]]


class FieldUpdateRequest(BaseModel):
    """A single keystroke-level edit of one form field."""

    fields: RawFields = Field(
        default_factory=dict,
        description="Current field map; missing keys are treated as absent",
    )
    name: str = Field(..., description="Field being edited", examples=["LL"])
    value: Optional[Any] = Field(
        default="",
        description="Raw input; empty or non-numeric text clears the field",
        examples=["40"],
    )


class FormRequest(BaseModel):
    """A full field map to validate or submit."""

    fields: RawFields = Field(
        default_factory=dict,
        examples=[{
            "Clay_Content": 30, "Silt_Content": 25, "LL": 40, "PL": 20,
            "SiO2": 55, "Al2O3": 15, "Fe2O3": 6, "MgO": 2, "CaO": 3,
            "CaO_lime": 4, "Mixing": 5, "Curing_Days": 28, "Water_Content": 18,
        }],
    )
