"""Boundary tests for the clay/silt and mixing constraints."""

from __future__ import annotations

import pytest

from ucs_predictor.validators import ConstraintCode, ValidationEngine
from ucs_predictor.validators.clay_silt_validator import ClaySiltConstraint
from ucs_predictor.validators.mixing_validator import MixingConstraint


def _fields(**values) -> dict:
    fields = ValidationEngine.empty_fields()
    fields.update(values)
    return fields


# -----------------------------------------------------------------------
# Clay + Silt
# -----------------------------------------------------------------------


@pytest.mark.parametrize("clay,silt", [(25.0, 25.0), (50.0, 50.01), (10.0, 10.0), (0.0, 0.0)])
def test_clay_silt_out_of_range_is_flagged(clay: float, silt: float) -> None:
    errors = ValidationEngine().validate(_fields(Clay_Content=clay, Silt_Content=silt))
    assert "ClaySilt" in errors
    assert errors["ClaySilt"]


@pytest.mark.parametrize("clay,silt", [(40.0, 35.0), (25.0, 25.01), (50.0, 50.0)])
def test_clay_silt_in_range_passes(clay: float, silt: float) -> None:
    errors = ValidationEngine().validate(_fields(Clay_Content=clay, Silt_Content=silt))
    assert "ClaySilt" not in errors


@pytest.mark.parametrize("present", [{"Clay_Content": 10.0}, {"Silt_Content": 10.0}, {}])
def test_clay_silt_needs_both_values(present: dict) -> None:
    assert ClaySiltConstraint().check(_fields(**present)) is None


def test_clay_silt_message_names_bounds() -> None:
    message = ClaySiltConstraint().check(_fields(Clay_Content=20.0, Silt_Content=20.0))
    assert "50%" in message and "100%" in message and "40%" in message


def test_clay_silt_custom_bounds() -> None:
    constraint = ClaySiltConstraint(lower=30.0, upper=90.0)
    assert constraint.check(_fields(Clay_Content=20.0, Silt_Content=20.0)) is None
    assert constraint.check(_fields(Clay_Content=50.0, Silt_Content=45.0)) is not None


# -----------------------------------------------------------------------
# Mixing
# -----------------------------------------------------------------------


def test_mixing_above_maximum_is_flagged() -> None:
    errors = ValidationEngine().validate(_fields(Mixing=12.01))
    assert "Mixing" in errors


@pytest.mark.parametrize("value", [12.0, 0.0, 5.5, None])
def test_mixing_at_or_below_maximum_passes(value) -> None:
    errors = ValidationEngine().validate(_fields(Mixing=value))
    assert "Mixing" not in errors


def test_mixing_reads_values_like_user_input() -> None:
    assert MixingConstraint().check({"Mixing": "15"}) is not None
    assert MixingConstraint().check({"Mixing": " 12 "}) is None
    assert MixingConstraint().check({"Mixing": "abc"}) is None
    assert MixingConstraint().check({"Mixing": float("nan")}) is None


def test_constraint_codes() -> None:
    assert ClaySiltConstraint().code == ConstraintCode.CLAY_SILT == "ClaySilt"
    assert MixingConstraint().code == ConstraintCode.MIXING == "Mixing"
    assert MixingConstraint().name == "MixingConstraint"
