"""
windzone - ASCE 7 wind pressure zones for low-rise building envelopes
"""

from .core.config import EngineConfig, TYPICAL_BUILDING_CONFIG
from .core.data_models import (
    ZonePressureRequest,
    ZoneCalculationResults,
    ExposureCategory,
    CalculationMethod,
)
from .core.errors import WindZoneError, InvalidGeometryError, InvalidRequestError
from .engines.zone_pressure_engine import ZonePressureEngine, compute_zone_pressures

__version__ = "0.1.0"
