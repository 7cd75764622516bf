import logging

import pytest

from delivery_planner.logging_config import APP_LOGGER
from delivery_planner.models import DeliveryJob


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo setup_logging() so caplog sees records again."""
    yield
    logger = logging.getLogger(APP_LOGGER)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def locations():
    return ["Port Olisar", "Lorville", "Area18", "New Babbage"]


@pytest.fixture
def sample_jobs():
    """Same jobs as delivery_planner/data/jobs_example.csv."""
    return [
        DeliveryJob("Carbon", {"Port Olisar": 6, "Lorville": 0, "Area18": 3, "New Babbage": 0}),
        DeliveryJob("Iron", {"Port Olisar": 4, "Lorville": 4, "Area18": 0, "New Babbage": 2}),
        DeliveryJob("Carbon", {"Port Olisar": 0, "Lorville": 0, "Area18": 0, "New Babbage": 5}),
        DeliveryJob("Quartz", {"Port Olisar": 0, "Lorville": 7, "Area18": 0, "New Babbage": 0}),
    ]
