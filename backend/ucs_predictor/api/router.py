"""Main API router: combines all endpoint routers."""

from fastapi import APIRouter

from ucs_predictor.api.health import router as health_router
from ucs_predictor.api.form import router as form_router
from ucs_predictor.api.predict import router as predict_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Form editing and validation
api_router.include_router(form_router, tags=["Form"])

# Submission to the prediction backend
api_router.include_router(predict_router, tags=["Prediction"])
