from pydantic import BaseModel, ConfigDict, Field


class PredictionRequest(BaseModel):
    """Validated form input, one number per clinical field"""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    age: float = Field(..., description="Age", ge=18, le=100)
    sex: float = Field(..., description="Sex", ge=0, le=1)
    cp: float = Field(..., description="Chest Pain Type", ge=0, le=3)
    trestbps: float = Field(..., description="Resting Blood Pressure", ge=90, le=200)
    chol: float = Field(..., description="Cholesterol", ge=120, le=570)
    fbs: float = Field(..., description="Fasting Blood Sugar", ge=0, le=1)
    restecg: float = Field(..., description="Resting ECG", ge=0, le=2)
    thalach: float = Field(..., description="Max Heart Rate", ge=60, le=220)
    exang: float = Field(..., description="Exercise Induced Angina", ge=0, le=1)
    oldpeak: float = Field(..., description="ST Depression", ge=0, le=5)
    slope: float = Field(..., description="ST Slope", ge=0, le=2)
    ca: float = Field(..., description="Number of Major Vessels", ge=0, le=3)
    thal: float = Field(..., description="Thalassemia", ge=0, le=3)
