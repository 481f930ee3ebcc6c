from heart_form.schemas.prediction.prediction import PredictionResult, Probability

__all__ = ["PredictionResult", "Probability"]
