import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from windzone.core.config import TYPICAL_BUILDING_CONFIG
from windzone.core.data_models import ZonePressureRequest


@pytest.fixture
def typical_config():
    return TYPICAL_BUILDING_CONFIG


@pytest.fixture
def elongated_request() -> ZonePressureRequest:
    """200' × 50' × 20' warehouse in open terrain, qh supplied"""
    return ZonePressureRequest(
        building_length=200.0,
        building_width=50.0,
        building_height=20.0,
        exposure_category="C",
        velocity_pressure=20.0,
    )


@pytest.fixture
def square_request() -> ZonePressureRequest:
    """100' × 100' × 30' building in suburban terrain, qh supplied"""
    return ZonePressureRequest(
        building_length=100.0,
        building_width=100.0,
        building_height=30.0,
        exposure_category="B",
        velocity_pressure=20.0,
    )
