from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # Prediction service
    PREDICTION_API_BASE_URL: str = "http://localhost:5000"
    PREDICTION_API_PATH: str = "/api/predict"
    PREDICTION_API_TIMEOUT: Optional[float] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    # Stub service
    ALLOWED_HOSTS: List[str] = ["http://localhost:8501"]
    STUB_POSITIVE_PROBABILITY: float = 0.5

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore'
    )

    @property
    def prediction_url(self) -> str:
        return f"{self.PREDICTION_API_BASE_URL.rstrip('/')}/{self.PREDICTION_API_PATH.lstrip('/')}"
