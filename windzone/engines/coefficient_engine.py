"""
Effective Wind Area Coefficient Interpolation
Maps (zone type, effective wind area, method) to an external pressure
coefficient GCp using log-linear interpolation between tabulated areas.
"""

from typing import Optional

import numpy as np

from ..core.coefficient_tables import (
    ControlPoints,
    get_control_points,
    get_prime_control_points,
    get_source,
)
from ..core.data_models import CalculationMethod, CoefficientResult, ZoneType
from ..core.errors import COEFFICIENT_OUT_OF_RANGE, tagged
from .zone1_prime_engine import qualifies_for_zone1_prime


def interpolate_control_points(
    points: ControlPoints,
    effective_area: float,
    source: str,
    label: Optional[str] = None,
) -> CoefficientResult:
    """
    Look up GCp from (area, GCp) control points.

    Exact control point -> tabulated value, interpolated=False.
    Between points      -> linear in log10(area).
    Outside the table   -> boundary value, interpolated=True, clamped=True.
    """
    if effective_area <= 0:
        raise ValueError(f"Effective wind area must be positive, got {effective_area}")

    areas = np.array([area for area, _ in points], dtype=float)
    values = np.array([gcp for _, gcp in points], dtype=float)

    for area, gcp in points:
        if effective_area == area:
            return CoefficientResult(gcp=gcp, interpolated=False, source=source)

    if effective_area < areas[0] or effective_area > areas[-1]:
        boundary = float(values[0] if effective_area < areas[0] else values[-1])
        name = label or "zone"
        return CoefficientResult(
            gcp=boundary,
            interpolated=True,
            source=source,
            clamped=True,
            warning=tagged(
                COEFFICIENT_OUT_OF_RANGE,
                f"Effective area {effective_area:g} sq ft outside tabulated range "
                f"{areas[0]:g}-{areas[-1]:g} sq ft for {name}; GCp clamped to {boundary:g}",
            ),
        )

    gcp = float(np.interp(np.log10(effective_area), np.log10(areas), values))
    return CoefficientResult(gcp=gcp, interpolated=True, source=source)


def interpolate_pressure_coefficient(
    zone_type: ZoneType,
    effective_area: float,
    method: CalculationMethod = CalculationMethod.COMPONENT_CLADDING,
) -> CoefficientResult:
    """GCp for a zone type from its tabulated curve"""
    return interpolate_control_points(
        get_control_points(zone_type, method),
        effective_area,
        get_source(zone_type, method),
        label=f"{zone_type.value} ({method.value})",
    )


def zone_coefficient(
    zone_type: ZoneType,
    effective_area: float,
    method: CalculationMethod,
    aspect_ratio: float,
    height_ratio: float,
) -> CoefficientResult:
    """
    GCp keyed by building ratios.

    When the ratios qualify for Zone 1' the enhanced band for the matching
    aspect ratio applies; otherwise the standard curve of the base zone type.
    """
    if not qualifies_for_zone1_prime(aspect_ratio, height_ratio):
        return interpolate_pressure_coefficient(zone_type.base_type, effective_area, method)

    prime_type = zone_type.prime_type
    return interpolate_control_points(
        get_prime_control_points(prime_type, method, aspect_ratio),
        effective_area,
        get_source(prime_type, method),
        label=f"{prime_type.value} ({method.value})",
    )
