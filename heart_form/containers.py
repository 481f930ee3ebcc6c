from dependency_injector import containers, providers

from heart_form.core.config import Settings
from heart_form.services.form_controller import FormController
from heart_form.services.form_validator import FormValidator
from heart_form.services.prediction_client import PredictionClient
from heart_form.services.stub_model_service import StubModelService


class Container(containers.DeclarativeContainer):
    # Config
    config = providers.Singleton(Settings)

    # Client side
    prediction_client = providers.Singleton(
        PredictionClient,
        url=config.provided.prediction_url,
        timeout=config.provided.PREDICTION_API_TIMEOUT
    )

    form_validator = providers.Singleton(FormValidator)

    # One controller per UI session
    form_controller = providers.Factory(
        FormController,
        client=prediction_client,
        validator=form_validator
    )

    # Stub prediction service
    stub_model_service = providers.Singleton(
        StubModelService,
        positive_probability=config.provided.STUB_POSITIVE_PROBABILITY
    )
