"""Form models: field names, constraint codes, field metadata, and form state.

The field map is a plain dict keyed by field name; absent values are ``None``,
which is distinct from zero.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

FieldMap = dict[str, Optional[float]]
ErrorMap = dict[str, Optional[str]]


class FieldName(str, Enum):
    """Measurements collected by the form, in presentation order."""

    CLAY_CONTENT = "Clay_Content"
    SILT_CONTENT = "Silt_Content"
    LL = "LL"
    PL = "PL"
    PI = "PI"
    SIO2 = "SiO2"
    AL2O3 = "Al2O3"
    FE2O3 = "Fe2O3"
    MGO = "MgO"
    CAO = "CaO"
    CAO_LIME = "CaO_lime"
    MIXING = "Mixing"
    CURING_DAYS = "Curing_Days"
    WATER_CONTENT = "Water_Content"


class ConstraintCode(str, Enum):
    """Identifiers of cross-field constraints reported in the error map."""

    CLAY_SILT = "ClaySilt"
    MIXING = "Mixing"


# Canonical order; also the payload order sent to the prediction backend
FIELD_ORDER: tuple[str, ...] = tuple(f.value for f in FieldName)

# Engine-owned fields, never set from user input
DERIVED_FIELDS: frozenset[str] = frozenset({FieldName.PI.value})


class FieldSpec(BaseModel):
    """Display metadata for a single form field."""

    name: FieldName
    label: str
    unit: Optional[str] = None
    derived: bool = False

    class Config:
        use_enum_values = True


FIELD_SPECS: list[FieldSpec] = [
    FieldSpec(name=FieldName.CLAY_CONTENT, label="Clay Content", unit="%"),
    FieldSpec(name=FieldName.SILT_CONTENT, label="Silt Content", unit="%"),
    FieldSpec(name=FieldName.LL, label="Liquid Limit", unit="%"),
    FieldSpec(name=FieldName.PL, label="Plastic Limit", unit="%"),
    FieldSpec(name=FieldName.PI, label="Plasticity Index", unit="%", derived=True),
    FieldSpec(name=FieldName.SIO2, label="SiO2", unit="%"),
    FieldSpec(name=FieldName.AL2O3, label="Al2O3", unit="%"),
    FieldSpec(name=FieldName.FE2O3, label="Fe2O3", unit="%"),
    FieldSpec(name=FieldName.MGO, label="MgO", unit="%"),
    FieldSpec(name=FieldName.CAO, label="CaO", unit="%"),
    FieldSpec(name=FieldName.CAO_LIME, label="CaO (lime)", unit="%"),
    FieldSpec(name=FieldName.MIXING, label="Mixing", unit="%"),
    FieldSpec(name=FieldName.CURING_DAYS, label="Curing Days", unit="days"),
    FieldSpec(name=FieldName.WATER_CONTENT, label="Water Content", unit="%"),
]


class FormState(BaseModel):
    """Field map and error map handed back to the rendering layer."""

    fields: FieldMap = Field(default_factory=lambda: {name: None for name in FIELD_ORDER})
    errors: ErrorMap = Field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not any(self.errors.values())
