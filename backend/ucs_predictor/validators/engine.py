"""Validation Engine: derives PI, runs all constraints, gates submission.

This is the main entry point for form handling. Every operation is a pure
function of its arguments: the engine keeps no field map between calls.

Usage:
    engine = ValidationEngine()
    fields = engine.update_field(fields, "LL", "40")
    errors = engine.validate(fields)
    if engine.is_submittable(fields, errors) is True:
        payload = engine.build_payload(fields)
"""

import time
from collections.abc import Mapping
from typing import Any, Optional, Union

import structlog

from ucs_predictor.config import Settings, get_settings
from ucs_predictor.validators.base import BaseConstraint, parse_numeric
from ucs_predictor.validators.clay_silt_validator import ClaySiltConstraint
from ucs_predictor.validators.mixing_validator import MixingConstraint
from ucs_predictor.validators.models import (
    DERIVED_FIELDS,
    FIELD_ORDER,
    ErrorMap,
    FieldMap,
    FieldName,
    FormState,
)

logger = structlog.get_logger()


def _field_key(name: Union[FieldName, str]) -> str:
    return name.value if isinstance(name, FieldName) else str(name)


class ValidationEngine:
    """Owns the field set, the PI derivation and the constraint chain.

    Design principles:
        - Deterministic: same input → same output, same key order
        - Immutable in, immutable out: inputs are never mutated
        - Permissive: user input never raises
    """

    def __init__(
        self,
        constraints: Optional[list[BaseConstraint]] = None,
        require_pi: bool = False,
    ):
        """Initialize with default constraints or a custom list.

        Args:
            constraints: Optional list of constraints. If None, uses all defaults.
            require_pi: Treat an absent PI as a missing field at submit time.
        """
        self.constraints = constraints if constraints is not None else self._default_constraints()
        self.require_pi = require_pi

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ValidationEngine":
        """Build an engine using the configured limits and submission policy."""
        settings = settings or get_settings()
        return cls(
            constraints=[
                ClaySiltConstraint(lower=settings.CLAY_SILT_MIN, upper=settings.CLAY_SILT_MAX),
                MixingConstraint(maximum=settings.MIXING_MAX),
            ],
            require_pi=settings.REQUIRE_PI,
        )

    @staticmethod
    def _default_constraints() -> list[BaseConstraint]:
        """Create the default constraint chain in reporting order."""
        return [
            ClaySiltConstraint(),
            MixingConstraint(),
        ]

    # ── Field map ──

    @staticmethod
    def empty_fields() -> FieldMap:
        """All fields absent, as at session start."""
        return {name: None for name in FIELD_ORDER}

    def reset(self) -> FormState:
        """Cleared form: every field absent and no errors."""
        return FormState(fields=self.empty_fields(), errors={})

    @staticmethod
    def _with_derived(fields: FieldMap) -> FieldMap:
        ll = parse_numeric(fields.get(FieldName.LL.value))
        pl = parse_numeric(fields.get(FieldName.PL.value))
        fields[FieldName.PI.value] = ll - pl if ll is not None and pl is not None else None
        return fields

    def derive(self, fields: Mapping[str, Any]) -> FieldMap:
        """Normalise an arbitrary client map into a complete field map.

        Unknown keys are dropped, values are parsed like user input, and
        PI is recomputed from LL and PL.
        """
        normalised = {
            name: None if name in DERIVED_FIELDS else parse_numeric(fields.get(name))
            for name in FIELD_ORDER
        }
        return self._with_derived(normalised)

    def update_field(self, fields: FieldMap, name: Union[FieldName, str], raw_value: Any) -> FieldMap:
        """Set one field from raw user input and return a new field map.

        Args:
            fields: Current field map (left untouched)
            name: Field being edited
            raw_value: Text as typed; empty or unparsable text becomes absent

        Returns:
            New field map with PI consistent with LL and PL
        """
        updated = dict(fields)
        key = _field_key(name)

        if key in DERIVED_FIELDS:
            logger.debug("field_update_ignored", field=key, reason="derived")
        elif key not in FIELD_ORDER:
            logger.warning("field_update_ignored", field=key, reason="unknown")
        else:
            updated[key] = parse_numeric(raw_value)

        return self._with_derived(updated)

    # ── Constraints ──

    def validate(self, fields: FieldMap) -> ErrorMap:
        """Run every constraint against the field map.

        Returns:
            Error map keyed by constraint code, in constraint-chain order
        """
        start_time = time.perf_counter()
        errors: ErrorMap = {}

        for constraint in self.constraints:
            message = constraint.check(fields)
            if message:
                errors[constraint.code.value] = message

        logger.debug(
            "validation_complete",
            violated=list(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )
        return errors

    def apply(self, fields: FieldMap, name: Union[FieldName, str], raw_value: Any) -> FormState:
        """update_field followed by validate: one render cycle."""
        updated = self.update_field(fields, name, raw_value)
        return FormState(fields=updated, errors=self.validate(updated))

    def missing_field(self, fields: FieldMap) -> Optional[FieldName]:
        """First absent required field in presentation order, if any."""
        for name in FieldName:
            if name.value in DERIVED_FIELDS and not self.require_pi:
                continue
            if parse_numeric(fields.get(name.value)) is None:
                return name
        return None

    def is_submittable(self, fields: FieldMap, errors: ErrorMap) -> Union[bool, FieldName]:
        """Submission gate.

        Returns:
            The first missing field if any is absent; otherwise True when
            no constraint is violated and False when one is.
        """
        missing = self.missing_field(fields)
        if missing is not None:
            return missing
        return not any(errors.values())

    # ── Payload ──

    def build_payload(self, fields: FieldMap) -> dict[str, float]:
        """Exact payload for the prediction backend, every field as a float.

        Raises:
            ValueError: if any field (PI included) is absent
        """
        complete = self.derive(fields)
        for name in FIELD_ORDER:
            if complete[name] is None:
                raise ValueError(f"Please enter a value for {name}")
        return {name: float(complete[name]) for name in FIELD_ORDER}

    def add_constraint(self, constraint: BaseConstraint) -> None:
        """Add a custom constraint to the chain."""
        self.constraints.append(constraint)

    def remove_constraint(self, code: str) -> None:
        """Remove a constraint by its code."""
        self.constraints = [c for c in self.constraints if c.code != code]


# Module-level singleton
validation_engine = ValidationEngine.from_settings()
