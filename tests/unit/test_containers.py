from dependency_injector import providers

from heart_form.containers import Container
from heart_form.core import config as config_module
from heart_form.core.config import Settings
from heart_form.services.form_controller import FormController
from heart_form.services.prediction_client import PredictionClient


class TestContainer:
    def test_prediction_client_uses_settings(self):
        # Arrange
        container = Container()
        container.config.override(providers.Object(Settings(
            PREDICTION_API_BASE_URL="http://risk.example:8000/",
            PREDICTION_API_PATH="/api/predict",
            PREDICTION_API_TIMEOUT=5.0,
        )))

        # Act
        client = container.prediction_client()

        # Assert
        assert isinstance(client, PredictionClient)
        assert client.url == "http://risk.example:8000/api/predict"
        assert client.timeout == 5.0

    def test_default_settings(self):
        settings = Settings(_env_file=None)

        assert settings.prediction_url == "http://localhost:5000/api/predict"
        assert settings.PREDICTION_API_TIMEOUT is None

    def test_settings_come_from_container_only(self):
        assert not hasattr(config_module, "settings")
        assert isinstance(Container().config(), Settings)

    def test_form_controller_per_session(self):
        container = Container()

        first = container.form_controller()
        second = container.form_controller()

        assert isinstance(first, FormController)
        assert first is not second
        assert first.client is second.client
        first.set_value("age", "50")
        assert second.form_state["age"] == ""
