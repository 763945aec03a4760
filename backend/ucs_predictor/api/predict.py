"""Predict API: gate a submitted form and forward it to the UCS model."""

from fastapi import APIRouter, Depends, HTTPException, Request

import structlog

from ucs_predictor.models.requests import FormRequest
from ucs_predictor.models.responses import PredictionResponse
from ucs_predictor.services.prediction_client import PredictionClient, PredictionError
from ucs_predictor.validators import validation_engine

logger = structlog.get_logger()

router = APIRouter()


def get_prediction_client(request: Request) -> PredictionClient:
    """Prediction client created in the application lifespan."""
    return request.app.state.prediction_client


@router.post("/predict", response_model=PredictionResponse)
async def predict_ucs(
    request_body: FormRequest,
    client: PredictionClient = Depends(get_prediction_client),
):
    """Validate the form and return the predicted UCS.

    Missing fields and constraint violations are rejected with 422 before
    anything is sent to the prediction backend.
    """
    fields = validation_engine.derive(request_body.fields)
    errors = validation_engine.validate(fields)
    gate = validation_engine.is_submittable(fields, errors)

    if gate is not True:
        missing = None if isinstance(gate, bool) else gate.value
        if missing:
            message = f"Please enter a value for {missing}"
        else:
            message = "Please fix the highlighted fields before predicting"
        logger.info("prediction_blocked", missing_field=missing, violated=list(errors))
        raise HTTPException(
            status_code=422,
            detail={"error": "form_invalid", "message": message, "errors": errors},
        )

    payload = validation_engine.build_payload(fields)

    try:
        ucs = await client.predict(payload)
    except PredictionError as e:
        raise HTTPException(
            status_code=502,
            detail={"error": "prediction_failed", "message": str(e)},
        )

    return PredictionResponse(ucs=ucs, display=f"Predicted UCS: {ucs} MPa")
