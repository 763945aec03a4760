"""Mixing Validator: additive percentage cap."""

from typing import Optional

from ucs_predictor.validators.base import BaseConstraint
from ucs_predictor.validators.models import ConstraintCode, FieldMap, FieldName


class MixingConstraint(BaseConstraint):
    """Flags a Mixing percentage above the allowed maximum."""

    def __init__(self, maximum: float = 12.0):
        self.maximum = maximum

    @property
    def code(self) -> ConstraintCode:
        return ConstraintCode.MIXING

    def check(self, fields: FieldMap) -> Optional[str]:
        mixing = self._value(fields, FieldName.MIXING.value)
        if mixing is not None and mixing > self.maximum:
            return f"Mixing must not exceed {self.maximum:g}% (currently {mixing:g}%)"
        return None
