import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from heart_form.core.exceptions import MalformedResponseError, PredictionTransportError
from heart_form.schemas.prediction import PredictionResult
from heart_form.schemas.prediction.requests.prediction_request import PredictionRequest


logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Failed to get prediction"
MALFORMED_RESPONSE_MESSAGE = "Received an unexpected response from the prediction service"


class PredictionClient:
    """Async client for the remote heart disease prediction endpoint"""

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the prediction client

        Args:
            url: Full URL of the predict endpoint
            timeout: Request timeout in seconds, None waits indefinitely
            transport: Optional httpx transport, used to plug in mocks or an ASGI app
        """
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def predict(self, request: PredictionRequest) -> PredictionResult:
        """
        Send one prediction request

        A client is opened per call so no connection pool outlives the
        event loop that created it.

        Raises:
            PredictionTransportError: On network failure or non-2xx status
            MalformedResponseError: On a 2xx body that is not a prediction
        """
        payload = request.model_dump()
        logger.info(f"Requesting prediction from {self.url}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as e:
                logger.error(f"Prediction request to {self.url} failed: {e!r}")
                raise PredictionTransportError(FALLBACK_ERROR_MESSAGE) from e

        if not response.is_success:
            message = _error_message(response)
            logger.error(f"Prediction service returned {response.status_code}: {message}")
            raise PredictionTransportError(message, status_code=response.status_code)

        try:
            result = PredictionResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Malformed prediction response: {response.text[:300]!r}")
            raise MalformedResponseError(MALFORMED_RESPONSE_MESSAGE) from e

        total = result.probability.positive + result.probability.negative
        if abs(total - 1.0) > 1e-3:
            logger.warning(f"Prediction probabilities sum to {total:.4f}, expected 1.0")

        return result


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return FALLBACK_ERROR_MESSAGE
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return FALLBACK_ERROR_MESSAGE
