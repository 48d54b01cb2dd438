"""
Shared test fixtures — FastAPI test client and sample frame inputs.
"""

import pytest
from fastapi.testclient import TestClient

from aluframe.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def panel_fields():
    """Three panel window, collar 1, 48" × 36"."""
    return {"collar_type": 1, "height": 48, "width": 36}


@pytest.fixture
def panel_rates():
    """Rates covering every section a three panel window needs."""
    return {"DC30F": 100, "DC26F": 100, "M23": 50, "M28": 50, "M24": 50, "D29": 80}
