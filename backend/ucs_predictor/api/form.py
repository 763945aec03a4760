"""Form API: field metadata, per-keystroke updates, validation, reset."""

from fastapi import APIRouter

import structlog

from ucs_predictor.models.requests import FieldUpdateRequest, FormRequest
from ucs_predictor.models.responses import FormStateResponse
from ucs_predictor.validators import FIELD_SPECS, FieldSpec, FormState, validation_engine

logger = structlog.get_logger()

router = APIRouter(prefix="/form")


def _state_response(state: FormState) -> FormStateResponse:
    """Attach the submission gate to an engine state."""
    gate = validation_engine.is_submittable(state.fields, state.errors)
    return FormStateResponse(
        fields=state.fields,
        errors=state.errors,
        submittable=gate is True,
        missing_field=None if isinstance(gate, bool) else gate.value,
    )


@router.get("/fields", response_model=list[FieldSpec])
async def list_fields():
    """Ordered field metadata for drawing the form."""
    return FIELD_SPECS


@router.api_route("/reset", methods=["GET", "POST"], response_model=FormStateResponse)
async def reset_form():
    """Empty form: every field absent, no errors."""
    return _state_response(validation_engine.reset())


@router.post("/update", response_model=FormStateResponse)
async def update_field(request_body: FieldUpdateRequest):
    """Apply one edit, re-derive PI and re-validate."""
    fields = validation_engine.derive(request_body.fields)
    state = validation_engine.apply(fields, request_body.name, request_body.value)
    return _state_response(state)


@router.post("/validate", response_model=FormStateResponse)
async def validate_form(request_body: FormRequest):
    """Validate a full field map without editing it."""
    fields = validation_engine.derive(request_body.fields)
    state = FormState(fields=fields, errors=validation_engine.validate(fields))
    return _state_response(state)
