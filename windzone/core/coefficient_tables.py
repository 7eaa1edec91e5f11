"""
External Pressure Coefficient Tables (GCp) for Low-Slope Roofs

Control points are (effective wind area in sq ft, GCp). Between control points
coefficients are interpolated on log10(area); outside the table the boundary
value applies.
"""

from typing import Dict, List, Tuple

from .data_models import CalculationMethod, ZoneType

ControlPoints = List[Tuple[float, float]]

CC_SOURCE = "ASCE 7-22 Figure 26.11-1"
MWFRS_SOURCE = "ASCE 7-22 Figure 26.5-2"
ZONE1_PRIME_SOURCE = "ASCE 7-22 Figure 26.11-1A (Zone 1')"

CC = CalculationMethod.COMPONENT_CLADDING
MWFRS = CalculationMethod.MAIN_FORCE


# Standard zones
BASELINE_COEFFICIENTS: Dict[Tuple[ZoneType, CalculationMethod], ControlPoints] = {
    (ZoneType.FIELD, CC): [(10.0, -1.0), (100.0, -0.9), (500.0, -0.8)],
    (ZoneType.PERIMETER, CC): [(10.0, -1.5), (100.0, -1.4), (500.0, -1.2)],
    (ZoneType.CORNER, CC): [(10.0, -2.5), (100.0, -2.4), (500.0, -2.0)],
    (ZoneType.FIELD, MWFRS): [(10.0, -0.7), (500.0, -0.7)],
    (ZoneType.PERIMETER, MWFRS): [(10.0, -1.2), (500.0, -1.2)],
    (ZoneType.CORNER, MWFRS): [(10.0, -1.8), (500.0, -1.8)],
}


# Zone 1' zones, banded by aspect ratio: (minimum aspect ratio, control points).
# Bands are listed from the most severe down; the last band applies to any
# building that qualifies for Zone 1' through its height ratio alone.
ZONE1_PRIME_BANDS: Dict[Tuple[ZoneType, CalculationMethod], List[Tuple[float, ControlPoints]]] = {
    (ZoneType.CORNER_PRIME, CC): [
        (3.0, [(10.0, -3.4), (100.0, -3.0), (500.0, -2.6)]),
        (2.5, [(10.0, -3.2), (100.0, -2.8), (500.0, -2.4)]),
        (0.0, [(10.0, -2.8), (100.0, -2.5), (500.0, -2.2)]),
    ],
    (ZoneType.PERIMETER_PRIME, CC): [
        (3.0, [(10.0, -2.2), (100.0, -1.8), (500.0, -1.5)]),
        (0.0, [(10.0, -2.0), (100.0, -1.6), (500.0, -1.4)]),
    ],
    # Field zones are not enhanced
    (ZoneType.FIELD_PRIME, CC): [
        (0.0, [(10.0, -1.0), (100.0, -0.9), (500.0, -0.8)]),
    ],
    (ZoneType.CORNER_PRIME, MWFRS): [
        (3.0, [(10.0, -2.3), (500.0, -2.3)]),
        (2.5, [(10.0, -2.2), (500.0, -2.2)]),
        (0.0, [(10.0, -2.0), (500.0, -2.0)]),
    ],
    (ZoneType.PERIMETER_PRIME, MWFRS): [
        (3.0, [(10.0, -1.5), (500.0, -1.5)]),
        (0.0, [(10.0, -1.4), (500.0, -1.4)]),
    ],
    (ZoneType.FIELD_PRIME, MWFRS): [
        (0.0, [(10.0, -0.7), (500.0, -0.7)]),
    ],
}


def get_control_points(zone_type: ZoneType, method: CalculationMethod) -> ControlPoints:
    """Control points for a zone type; prime zones use their least severe band"""
    if zone_type.is_prime:
        return ZONE1_PRIME_BANDS[(zone_type, method)][-1][1]
    return BASELINE_COEFFICIENTS[(zone_type, method)]


def get_prime_control_points(
    zone_type: ZoneType, method: CalculationMethod, aspect_ratio: float
) -> ControlPoints:
    """Zone 1' control points for the band matching the aspect ratio"""
    for min_aspect, points in ZONE1_PRIME_BANDS[(zone_type, method)]:
        if aspect_ratio >= min_aspect:
            return points
    return ZONE1_PRIME_BANDS[(zone_type, method)][-1][1]


def get_source(zone_type: ZoneType, method: CalculationMethod) -> str:
    if zone_type.is_prime:
        return ZONE1_PRIME_SOURCE
    return CC_SOURCE if method == CalculationMethod.COMPONENT_CLADDING else MWFRS_SOURCE
