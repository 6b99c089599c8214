"""
Test configuration and fixtures for SwatchGrid tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app
from swatchgrid.utils.metrics import reset_metrics


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def clean_metrics():
    """Reset metrics before each test."""
    reset_metrics()


class RecordingPresenter:
    """Presenter double that keeps every frame it is handed."""
    
    def __init__(self):
        self.frames = []
    
    def present(self, frame):
        self.frames.append(frame)


@pytest.fixture
def presenter():
    return RecordingPresenter()
