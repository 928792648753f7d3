import logging
import pytest
from typing import List
from app.domain.entities.user import User
from app.infrastructure.config.logging_config import ROOT_LOGGER_NAME


@pytest.fixture
def sample_users() -> List[User]:
    return [
        User(id=1, name="Alice"),
        User(id=2, name="Bob"),
        User(id=3, name="Carol")
    ]


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Deja el logger "app" como estaba despues de cada test"""
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = app_logger.level
    handlers = list(app_logger.handlers)

    yield

    for handler in list(app_logger.handlers):
        if handler not in handlers:
            app_logger.removeHandler(handler)
            handler.close()
    app_logger.setLevel(level)
