import logging
from typing import Dict, Optional, Tuple

from heart_form.core.exceptions import FormValidationError, PredictionServiceError
from heart_form.schemas.fields import FIELDS_BY_KEY, FormState, new_form_state
from heart_form.schemas.prediction.requests.prediction_request import PredictionRequest
from heart_form.schemas.ui_state import ErrorState, IdleState, LoadingState, ResultState, UIState
from heart_form.services.form_validator import FormValidator
from heart_form.services.prediction_client import PredictionClient


logger = logging.getLogger(__name__)


class FormController:
    """Owns the form values and UI state of one prediction form"""

    def __init__(self, client: PredictionClient, validator: Optional[FormValidator] = None):
        """
        Initialize the form controller

        Args:
            client: Client used to reach the prediction service
            validator: Form validator, a default one is created when omitted
        """
        self.client = client
        self.validator = validator or FormValidator()
        self.form_state: FormState = new_form_state()
        self.field_errors: Dict[str, str] = {}
        self.ui_state: UIState = IdleState()
        # bumped on every submit and reset, used to drop stale responses
        self._generation = 0
        self._pending: Optional[Tuple[int, PredictionRequest]] = None

    @property
    def is_loading(self) -> bool:
        return self.ui_state.status == "loading"

    @property
    def is_submit_disabled(self) -> bool:
        return self.is_loading

    @property
    def has_pending_request(self) -> bool:
        return self._pending is not None

    def set_value(self, key: str, value: str) -> None:
        """
        Store the raw input of one field

        Raises:
            KeyError: Unknown field key
            ValueError: Value outside the choice set of an enumerated field
        """
        spec = FIELDS_BY_KEY[key]
        value = value or ""
        if spec.kind.type == "enumerated" and value and value not in spec.kind.codes:
            raise ValueError(f"{value!r} is not a valid choice for {key}")
        self.form_state[key] = value

    def begin_submit(self) -> bool:
        """
        Validate the form and, if valid, enter the loading state

        The validated request is kept until send_pending() is awaited.

        Returns:
            True when a request is now pending
        """
        if self.is_loading:
            logger.warning("Submit ignored: a prediction request is already in flight")
            return False

        try:
            request = self.validator.validate(self.form_state)
        except FormValidationError as e:
            self.field_errors = e.field_errors
            return False

        self.field_errors = {}
        self._generation += 1
        self._pending = (self._generation, request)
        self.ui_state = LoadingState()
        return True

    async def send_pending(self) -> UIState:
        """
        Send the request prepared by begin_submit() and apply its outcome

        Returns:
            The UI state once the request is over
        """
        if self._pending is None:
            return self.ui_state
        generation, request = self._pending
        self._pending = None

        try:
            result = await self.client.predict(request)
            outcome = ResultState(result=result)
        except PredictionServiceError as e:
            outcome = ErrorState(message=e.message)

        if generation != self._generation:
            logger.info("Discarding prediction response received after reset")
            return self.ui_state

        self.ui_state = outcome
        return outcome

    async def submit(self) -> UIState:
        """
        Validate the form and, if valid, request a prediction

        Returns:
            The UI state once the submission attempt is over
        """
        if not self.begin_submit():
            return self.ui_state
        return await self.send_pending()

    def reset(self) -> None:
        """Clear every field and return to the idle state"""
        self._generation += 1
        self._pending = None
        self.form_state = new_form_state()
        self.field_errors = {}
        self.ui_state = IdleState()
