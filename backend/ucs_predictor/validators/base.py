"""Base constraint: abstract class implementing the Strategy Pattern.

Each constraint is a standalone, independently testable unit.
New constraints are added without modifying the engine.
"""

from abc import ABC, abstractmethod
import math
from typing import Any, Optional

from ucs_predictor.validators.models import ConstraintCode, FieldMap


def parse_numeric(raw: Any) -> Optional[float]:
    """Parse user input into a float; empty, non-numeric and non-finite input is absent."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


class BaseConstraint(ABC):
    """Abstract base for all cross-field constraints.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns a message when violated, None otherwise
        - check() never raises for absent or partial input
    """

    @property
    @abstractmethod
    def code(self) -> ConstraintCode:
        """Identifier used as the error map key."""
        ...

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    @abstractmethod
    def check(self, fields: FieldMap) -> Optional[str]:
        """Evaluate the constraint against the field map.

        Args:
            fields: Current field map (absent values are None)

        Returns:
            Violation message, or None if the constraint holds
        """
        ...

    # ── Helper Methods ──

    @staticmethod
    def _value(fields: FieldMap, name: str) -> Optional[float]:
        """Read a field the same way user input is parsed."""
        return parse_numeric(fields.get(name))
