# Wind pressure calculation engines
from .exposure_engine import calculate_kz, calculate_velocity_pressure, velocity_pressure_warnings
from .enclosure_engine import classify_enclosure, internal_pressure_for
from .aspect_engine import analyze_building_geometry, assess_wind_vulnerability, classify_building
from .zone1_prime_engine import analyze_zone1_prime, calculate_pressure_increase, detection_confidence
from .coefficient_engine import interpolate_pressure_coefficient, zone_coefficient
from .zone_geometry_engine import build_zone_layout, calculate_zone_dimensions
from .pressure_engine import calculate_net_pressure, internal_pressure_cases
from .results_engine import (
    aggregate_results,
    consistency_warnings,
    get_zone_calculation_summary,
    special_analysis_reasons,
)
from .zone_pressure_engine import ZonePressureEngine, compute_zone_pressures
