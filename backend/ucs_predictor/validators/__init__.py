"""Form validator: deterministic derivation and constraint layer for soil-mixture inputs.

Usage:
    from ucs_predictor.validators import validation_engine

    state = validation_engine.apply(fields, "LL", "40")
    if validation_engine.is_submittable(state.fields, state.errors) is True:
        payload = validation_engine.build_payload(state.fields)
"""

from ucs_predictor.validators.base import BaseConstraint, parse_numeric
from ucs_predictor.validators.engine import ValidationEngine, validation_engine
from ucs_predictor.validators.models import (
    ConstraintCode,
    ErrorMap,
    FieldMap,
    FieldName,
    FieldSpec,
    FormState,
    FIELD_ORDER,
    FIELD_SPECS,
)

__all__ = [
    "BaseConstraint",
    "ValidationEngine",
    "validation_engine",
    "parse_numeric",
    "ConstraintCode",
    "ErrorMap",
    "FieldMap",
    "FieldName",
    "FieldSpec",
    "FormState",
    "FIELD_ORDER",
    "FIELD_SPECS",
]
