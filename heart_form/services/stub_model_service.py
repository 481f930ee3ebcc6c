import logging
from datetime import datetime, timezone

from heart_form.schemas.prediction import PredictionResult, Probability
from heart_form.schemas.prediction.requests.prediction_request import PredictionRequest


logger = logging.getLogger(__name__)


class StubModelService:
    """Stand-in for the prediction service, answers with a configured probability"""

    def __init__(self, positive_probability: float):
        """
        Initialize the stub model service

        Args:
            positive_probability: Probability of heart disease returned for every request
        """
        if not 0.0 <= positive_probability <= 1.0:
            raise ValueError(f"positive_probability must be within [0, 1], got {positive_probability}")
        self.positive_probability = positive_probability

    def predict(self, request: PredictionRequest) -> PredictionResult:
        """
        Produce a prediction for one patient

        Args:
            request: Validated clinical measurements

        Returns:
            PredictionResult with class, probabilities and timestamp
        """
        try:
            positive = self.positive_probability
            return PredictionResult(
                success=True,
                prediction=1 if positive >= 0.5 else 0,
                probability=Probability(positive=positive, negative=1.0 - positive),
                timestamp=datetime.now(timezone.utc).isoformat(),
            )

        except Exception as e:
            logger.error(f"Error generating prediction for age={request.age}: {str(e)}")
            raise
