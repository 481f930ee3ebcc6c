from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from heart_form.schemas.prediction import PredictionResult


class IdleState(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["loading"] = "loading"


class ErrorState(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["error"] = "error"
    message: str


class ResultState(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["result"] = "result"
    result: PredictionResult


UIState = Annotated[
    Union[IdleState, LoadingState, ErrorState, ResultState],
    Field(discriminator="status"),
]
