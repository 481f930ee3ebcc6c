from typing import Optional

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr


# Strict types: booleans and numeric strings are not coerced into numbers
class Probability(BaseModel):
    positive: StrictFloat = Field(..., description="Probability of heart disease")
    negative: StrictFloat = Field(..., description="Probability of no heart disease")


class PredictionResult(BaseModel):
    prediction: StrictInt = Field(..., description="Predicted class, 1 = heart disease", ge=0, le=1)
    probability: Probability
    success: Optional[StrictBool] = None
    timestamp: Optional[StrictStr] = None

    @property
    def predicted_class(self) -> int:
        return self.prediction
