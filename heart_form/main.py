import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from heart_form.containers import Container
from heart_form.routers import predictions_router
from heart_form.utils.logger import setup_logger


# Logging configuration
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Log startup and shutdown of the stub service
    """
    settings = app.container.config()
    logger.info(f"Stub prediction service ready, positive probability={settings.STUB_POSITIVE_PROBABILITY}")

    yield

    logger.info("Shutting down stub prediction service...")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report invalid payloads with the {"error": ...} body the form expects
    """
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        details.append(f"{location}: {error['msg']}" if location else error["msg"])
    message = "Invalid request: " + "; ".join(details)
    logger.warning(message)
    return JSONResponse(status_code=400, content={"error": message})


def create_app(container: Optional[Container] = None) -> FastAPI:
    container = container or Container()
    settings = container.config()

    # Initialize the FastAPI application
    app = FastAPI(title="Heart Disease Prediction Stub", lifespan=lifespan)
    app.container = container

    # Add middlewares
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(predictions_router)

    return app


app = create_app()


if __name__ == "__main__":
    setup_logger(app.container.config().LOG_LEVEL)
    uvicorn.run(app, host="0.0.0.0", port=5000)
