from heart_form.routers.predictions import router as predictions_router

__all__ = ["predictions_router"]
