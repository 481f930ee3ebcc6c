import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, Mock

from heart_form.main import app
from heart_form.routers.predictions import get_model_service
from heart_form.schemas.prediction import PredictionResult, Probability
from heart_form.services.form_controller import FormController
from heart_form.services.prediction_client import PredictionClient
from heart_form.services.stub_model_service import StubModelService


@pytest.fixture
def valid_form_values():
    """Raw form input that passes validation"""
    return {
        "age": "54",
        "sex": "1",
        "cp": "0",
        "trestbps": "130",
        "chol": "246",
        "fbs": "0",
        "restecg": "1",
        "thalach": "150",
        "exang": "0",
        "oldpeak": "1",
        "slope": "2",
        "ca": "0",
        "thal": "2",
    }

@pytest.fixture
def sample_result():
    return PredictionResult(
        prediction=1,
        probability=Probability(positive=0.82, negative=0.18)
    )

@pytest.fixture
def mock_prediction_client(sample_result):
    client = Mock(spec=PredictionClient)
    client.predict = AsyncMock(return_value=sample_result)
    return client

@pytest.fixture
def controller(mock_prediction_client):
    return FormController(client=mock_prediction_client)

@pytest.fixture
def filled_controller(controller, valid_form_values):
    for key, value in valid_form_values.items():
        controller.set_value(key, value)
    return controller

@pytest.fixture
def mock_model_service():
    return Mock(spec=StubModelService)

@pytest.fixture
def test_client(mock_model_service):
    """TestClient whose stub model service is replaced by a mock"""
    saved_overrides = app.dependency_overrides.copy()
    app.dependency_overrides[get_model_service] = lambda: mock_model_service

    yield TestClient(app)

    app.dependency_overrides = saved_overrides
