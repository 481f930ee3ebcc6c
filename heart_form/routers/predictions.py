import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from heart_form.schemas.prediction import PredictionResult
from heart_form.schemas.prediction.requests.prediction_request import PredictionRequest
from heart_form.schemas.prediction.responses.prediction_response import ErrorResponse, HealthResponse
from heart_form.services.stub_model_service import StubModelService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Prediction, Heart Disease"])

def get_model_service(request: Request) -> StubModelService:
    return request.app.container.stub_model_service()

@router.post(
    "/predict",
    response_model=PredictionResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def predict(
    request: PredictionRequest,
    model_service: StubModelService = Depends(get_model_service)
):
    """
    Get the heart disease risk for one patient
    """
    try:
        return model_service.predict(request)
    except Exception as e:
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")
