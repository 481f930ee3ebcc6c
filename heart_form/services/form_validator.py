import logging
import re
from typing import Dict, Mapping

from pydantic import ValidationError

from heart_form.core.exceptions import FormValidationError
from heart_form.schemas.fields import FIELD_SPECS
from heart_form.schemas.prediction.requests.prediction_request import PredictionRequest


logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "This field is required"
NOT_A_NUMBER_MESSAGE = "Input should be a valid number"

# plain decimal with optional exponent; no digit separators, hex, inf or nan
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class FormValidator:
    """Turns raw form strings into a validated prediction request"""

    def validate(self, form_state: Mapping[str, str]) -> PredictionRequest:
        """
        Parse every field as a number and check its inclusive range

        Args:
            form_state: Raw string value per field key

        Returns:
            A fresh PredictionRequest holding the parsed numbers

        Raises:
            FormValidationError: With one message per offending field
        """
        field_errors: Dict[str, str] = {}
        payload: Dict[str, object] = {}

        for spec in FIELD_SPECS:
            raw = (form_state.get(spec.key) or "").strip()
            if not raw:
                field_errors[spec.key] = REQUIRED_MESSAGE
            elif not NUMBER_PATTERN.fullmatch(raw):
                field_errors[spec.key] = NOT_A_NUMBER_MESSAGE
            else:
                payload[spec.key] = float(raw)
                continue
            # placeholder so the model only reports range errors of the other fields
            payload[spec.key] = spec.min_value

        try:
            request = PredictionRequest.model_validate(payload)
        except ValidationError as e:
            for error in e.errors():
                key = str(error["loc"][0])
                field_errors.setdefault(key, error["msg"])

        if field_errors:
            logger.info(f"Form rejected, invalid fields: {sorted(field_errors)}")
            raise FormValidationError(field_errors)

        return request
