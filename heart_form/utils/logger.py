import logging
import sys

HANDLER_NAME = "heart_form"


def setup_logger(level: str = "INFO") -> logging.Logger:
    # Configure root logger
    logger = logging.getLogger()
    logger.setLevel(level)

    # Streamlit reruns the whole script on every interaction
    if any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        return logger

    # Create stdout handler with formatting
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.set_name(HANDLER_NAME)

    # Define log format
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s')
    handler.setFormatter(formatter)

    # Add handler to logger
    logger.addHandler(handler)

    return logger
