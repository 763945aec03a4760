"""Clay/Silt Validator: combined fine fraction must lie in (lower, upper]."""

from typing import Optional

from ucs_predictor.validators.base import BaseConstraint
from ucs_predictor.validators.models import ConstraintCode, FieldMap, FieldName


class ClaySiltConstraint(BaseConstraint):
    """Flags a Clay_Content + Silt_Content sum at or below the lower bound or above the upper bound."""

    def __init__(self, lower: float = 50.0, upper: float = 100.0):
        self.lower = lower
        self.upper = upper

    @property
    def code(self) -> ConstraintCode:
        return ConstraintCode.CLAY_SILT

    def check(self, fields: FieldMap) -> Optional[str]:
        clay = self._value(fields, FieldName.CLAY_CONTENT.value)
        silt = self._value(fields, FieldName.SILT_CONTENT.value)
        if clay is None or silt is None:
            return None

        total = clay + silt
        if total <= self.lower or total > self.upper:
            return (
                f"Clay + Silt content must be greater than {self.lower:g}% "
                f"and at most {self.upper:g}% (currently {total:g}%)"
            )
        return None
