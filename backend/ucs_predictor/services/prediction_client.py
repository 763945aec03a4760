"""Prediction client: single request/response exchange with the remote UCS model."""

import math
import time
from typing import Optional

import httpx
import structlog

from ucs_predictor.config import get_settings

logger = structlog.get_logger()

UNREACHABLE_MESSAGE = "Backend not running or unreachable!"


class PredictionError(Exception):
    """The remote model could not produce a numeric result."""


class PredictionClient:
    """Posts a fully numeric payload and returns the predicted UCS.

    One attempt per call; failures surface as PredictionError.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.http_client = http_client
        self.url = url or settings.PREDICTION_URL
        self.timeout = timeout if timeout is not None else settings.PREDICTION_TIMEOUT_SECONDS

    async def predict(self, payload: dict[str, float]) -> float:
        """Send the payload and return the ``ucs`` field of the response.

        Raises:
            PredictionError: unreachable backend, non-JSON reply, an ``error``
                field in the reply, or a missing, non-numeric or non-finite ``ucs``
        """
        start_time = time.time()
        logger.info("prediction_request", url=self.url, fields=len(payload))

        try:
            response = await self.http_client.post(self.url, json=payload, timeout=self.timeout)
        except httpx.HTTPError as e:
            logger.error("prediction_failed", url=self.url, error=str(e), error_type=type(e).__name__)
            raise PredictionError(UNREACHABLE_MESSAGE) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error("prediction_failed", status_code=response.status_code, error="non_json_response")
            raise PredictionError(
                f"Prediction backend returned a non-JSON response (HTTP {response.status_code})"
            ) from e

        if not isinstance(data, dict):
            raise PredictionError("Prediction backend returned an unexpected response")

        ucs = data.get("ucs")
        if ucs is None:
            if data.get("error"):
                logger.warning("prediction_rejected", status_code=response.status_code, error=data["error"])
                raise PredictionError(f"Error: {data['error']}")
            raise PredictionError("Prediction backend response has no 'ucs' value")

        if isinstance(ucs, bool):
            raise PredictionError(f"Prediction backend returned a non-numeric UCS: {ucs!r}")
        if not isinstance(ucs, (int, float)):
            try:
                ucs = float(ucs)
            except (TypeError, ValueError):
                raise PredictionError(f"Prediction backend returned a non-numeric UCS: {ucs!r}")
        if not math.isfinite(ucs):
            raise PredictionError(f"Prediction backend returned a non-finite UCS: {ucs!r}")

        logger.info(
            "prediction_complete",
            ucs=ucs,
            status_code=response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )
        return float(ucs)
