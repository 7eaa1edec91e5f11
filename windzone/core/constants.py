"""
Engineering Constants for ASCE 7-22 Low-Rise Wind Pressure Zones
"""

# Velocity pressure (ASCE 7-22 Eq. 26.10-1)
VELOCITY_PRESSURE_CONSTANT = 0.00256  # psf / mph²
KZ_COEFFICIENT = 2.01
DEFAULT_TOPOGRAPHIC_FACTOR = 1.0      # Kzt, flat terrain
DEFAULT_DIRECTIONALITY_FACTOR = 0.85  # Kd, buildings (Table 26.6-1)

# Terrain exposure constants (ASCE 7-22 Table 26.11-1)
# exposure: zg gradient height (ft), alpha power-law exponent, zmin (ft)
EXPOSURE_PARAMS = {
    "B": {"zg": 1200.0, "alpha": 7.0, "z_min": 30.0},
    "C": {"zg": 900.0, "alpha": 9.5, "z_min": 15.0},
    "D": {"zg": 700.0, "alpha": 11.5, "z_min": 15.0},
}

# Simplified (low-rise) procedure limits
SIMPLIFIED_HEIGHT_LIMIT = 60.0    # ft, mean roof height h <= 60 ft
TYPICAL_HEIGHT_LIMIT = 500.0      # ft, outside typical design range
TYPICAL_PLAN_DIMENSION_LIMIT = 1000.0  # ft

# Building classification thresholds
TOWER_HEIGHT_RATIO = 5.0
TOWER_HEIGHT = 300.0              # ft
HIGHLY_ELONGATED_ASPECT_RATIO = 4.0
ELONGATED_ASPECT_RATIO = 2.0

# Zone 1' triggers (inclusive thresholds)
ZONE1_PRIME_ASPECT_THRESHOLD = 2.0
ZONE1_PRIME_HEIGHT_THRESHOLD = 1.0
ZONE1_PRIME_PERIMETER_ASPECT = 3.0  # one enhanced perimeter strip

# Zone 1' pressure increase (%)
ASPECT_BASE_INCREASE = 20.0
HEIGHT_BASE_INCREASE = 15.0
INCREASE_PER_UNIT_RATIO = 10.0
OPEN_TERRAIN_BONUS = 5.0
MAX_PRESSURE_INCREASE = 40.0

# Zone geometry (ASCE 7-22 Figure 30.3-2A notes)
MIN_CORNER_DIMENSION = 3.0        # ft
MAX_PERIMETER_WIDTH = 10.0        # ft
ZONE_DIMENSION_FRACTION = 0.1

# Effective wind area
DEFAULT_EFFECTIVE_WIND_AREA = 10.0

# Enclosure classification (ASCE 7-22 Section 26.2, Table 26.13-1)
OPEN_BUILDING_RATIO = 0.80
DOMINANT_OPENING_FACTOR = 1.1
MIN_DOMINANT_OPENING_AREA = 4.0        # ft²
MIN_DOMINANT_OPENING_FRACTION = 0.01
MAX_OTHER_OPENING_RATIO = 0.20
LARGE_OPENING_FRACTION = 0.10

INTERNAL_PRESSURE_COEFFICIENTS = {
    "enclosed": (0.18, -0.18),
    "partially_enclosed": (0.55, -0.55),
    "open": (0.0, 0.0),
}

# Parameter consistency checks
UNUSUAL_ASPECT_RATIO = 5.0
DYNAMIC_HEIGHT_RATIO = 5.0
MIN_TYPICAL_PLAN_DIMENSION = 10.0  # ft
EXPOSURE_B_HEIGHT_LIMIT = 30.0     # ft
EXPOSURE_D_LOW_HEIGHT = 15.0       # ft
EXPOSURE_D_UNCOMMON_HEIGHT = 20.0  # ft
DYNAMIC_ANALYSIS_HEIGHT = 160.0    # ft
HIGH_WIND_SPEED = 200.0            # mph

# Zone 1' detection confidence (%)
ZONE1_PRIME_CONFIDENCE = 95.0
ZONE1_PRIME_CLEAR_CONFIDENCE = 85.0
ZONE1_PRIME_CLEAR_ASPECT = 1.8
ZONE1_PRIME_CLEAR_HEIGHT = 0.8
LARGE_EFFECTIVE_AREA = 100.0       # sq ft
LARGE_AREA_CONFIDENCE_PENALTY = 5.0
