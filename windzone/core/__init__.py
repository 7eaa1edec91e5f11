# Core wind zone modules
from .data_models import ExposureCategory, CalculationMethod, ZoneType, EnclosureType, NetPressureMode
from .constants import VELOCITY_PRESSURE_CONSTANT, EXPOSURE_PARAMS, INTERNAL_PRESSURE_COEFFICIENTS
from .coefficient_tables import BASELINE_COEFFICIENTS, ZONE1_PRIME_BANDS
