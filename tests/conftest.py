"""
Pytest configuration and fixtures for Inquiry Interview tests.
"""

import sys
from pathlib import Path

import pytest


# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from inquiry_interview.app.catalog import QuestionCatalog  # noqa: E402
from inquiry_interview.app.engine import InterviewEngine  # noqa: E402
from inquiry_interview.app.phases import PhaseController, PhaseThresholds  # noqa: E402
from inquiry_interview.core.catalog_data import DEFAULT_CATALOG  # noqa: E402
from inquiry_interview.core.domain.models import Turn  # noqa: E402


@pytest.fixture(scope="session")
def project_root_path():
    """Return the project root directory."""
    return project_root


@pytest.fixture
def sports_activity():
    """Activity description that clearly reads as competitive sports."""
    return "I practice soccer every day with my team and keep records of my training."


@pytest.fixture
def opening_transcript():
    """Three opening answers covering transport and time."""
    return (
        Turn("opening_1", "My name is Taro Yamada, candidate number 12."),
        Turn("opening_2", "I came by train."),
        Turn("opening_3", "It took about thirty minutes."),
    )


@pytest.fixture(scope="session")
def catalog():
    """The bundled question catalog."""
    return QuestionCatalog.from_dict(DEFAULT_CATALOG)


@pytest.fixture
def controller():
    """Phase controller with the default thresholds, independent of .env."""
    return PhaseController(thresholds=PhaseThresholds())


@pytest.fixture
def engine(catalog, controller):
    """Engine over the bundled catalog."""
    return InterviewEngine(catalog=catalog, controller=controller)
