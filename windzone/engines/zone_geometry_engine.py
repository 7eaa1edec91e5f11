"""
Pressure Zone Geometry - ASCE 7-22 Figure 26.11-1 / 26.11-1A
Partitions a rectangular roof footprint into corner, perimeter and field
zones, with Zone 1' enhanced coefficients where required.

Coordinates: origin at the northwest corner, x along the length (east),
y along the width (south).
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..core.config import EngineConfig
from ..core.constants import (
    DEFAULT_EFFECTIVE_WIND_AREA,
    MAX_PERIMETER_WIDTH,
    MIN_CORNER_DIMENSION,
    ZONE1_PRIME_PERIMETER_ASPECT,
    ZONE_DIMENSION_FRACTION,
)
from ..core.data_models import (
    BuildingGeometry,
    CalculationMethod,
    PressureZone,
    Zone1PrimeAnalysis,
    ZoneDimensions,
    ZoneLocation,
    ZoneType,
)
from .coefficient_engine import zone_coefficient

logger = logging.getLogger(__name__)


def calculate_zone_dimensions(length: float, width: float, height: float) -> ZoneDimensions:
    """
    Governing zone dimensions (ft).
    corner = max(3, min(0.1L, 0.1W, 3H, L/10, W/10)), limited to half the
             least plan dimension so corners stay inside the footprint
    perimeter width = min(0.1L, 0.1W, 2H, 10)
    """
    warnings: List[str] = []
    corner_dimension = max(
        MIN_CORNER_DIMENSION,
        min(
            ZONE_DIMENSION_FRACTION * length,
            ZONE_DIMENSION_FRACTION * width,
            3 * height,
            length / 10,
            width / 10,
        ),
    )

    half_least = min(length, width) / 2
    if corner_dimension > half_least:
        warnings.append(
            f"Corner zone dimension reduced from {corner_dimension:.1f}' to {half_least:.1f}' "
            f"to fit the {length:g}' × {width:g}' footprint"
        )
        corner_dimension = half_least

    perimeter_width = min(
        ZONE_DIMENSION_FRACTION * length,
        ZONE_DIMENSION_FRACTION * width,
        2 * height,
        MAX_PERIMETER_WIDTH,
    )

    return ZoneDimensions(
        corner_dimension=corner_dimension,
        perimeter_width=perimeter_width,
        warnings=tuple(warnings),
    )


def _effective_area(zone_type: ZoneType, zone_areas: Dict[ZoneType, float],
                    default_area: float) -> float:
    if zone_type in zone_areas:
        return zone_areas[zone_type]
    return zone_areas.get(zone_type.base_type, default_area)


def _corner_placements(length: float, width: float, c: float) -> List[Tuple[str, str, float, float]]:
    return [
        ("nw", "Northwest", 0.0, 0.0),
        ("ne", "Northeast", length - c, 0.0),
        ("sw", "Southwest", 0.0, width - c),
        ("se", "Southeast", length - c, width - c),
    ]


def _strip_placements(length: float, width: float, c: float, pw: float) -> List[Tuple[str, str, ZoneLocation]]:
    return [
        ("north", "North", ZoneLocation(x=c, y=0.0, width=length - 2 * c, height=pw)),
        ("south", "South", ZoneLocation(x=c, y=width - pw, width=length - 2 * c, height=pw)),
        ("west", "West", ZoneLocation(x=0.0, y=c, width=pw, height=width - 2 * c)),
        ("east", "East", ZoneLocation(x=length - pw, y=c, width=pw, height=width - 2 * c)),
    ]


def build_zone_layout(
    geometry: BuildingGeometry,
    analysis: Zone1PrimeAnalysis,
    dimensions: ZoneDimensions,
    method: CalculationMethod,
    config: EngineConfig,
    effective_wind_area: float = DEFAULT_EFFECTIVE_WIND_AREA,
    zone_effective_areas: Optional[Dict[ZoneType, float]] = None,
) -> Tuple[List[PressureZone], List[str]]:
    """
    Build corner, perimeter and field zones with their GCp.

    Net pressures are left at zero; NetPressureCalculator fills them in.

    Zone 1' required:
        - four corners are CORNER_PRIME, keyed by the analysis ratios
        - AR >= 3.0: the first strip along the longer side is PERIMETER_PRIME
    Otherwise every zone uses coefficients keyed by the configured baseline
    ratios.

    Returns:
        Tuple of (zones in emission order, coefficient warnings)
    """
    length, width = geometry.length, geometry.width
    c = dimensions.corner_dimension
    pw = dimensions.perimeter_width
    zone_areas = zone_effective_areas or {}
    zones: List[PressureZone] = []
    warnings: List[str] = []

    def coefficient(zone_type: ZoneType, enhanced: bool):
        area = _effective_area(zone_type, zone_areas, effective_wind_area)
        if enhanced:
            result = zone_coefficient(zone_type, area, method, analysis.aspect_ratio, analysis.height_ratio)
        else:
            result = zone_coefficient(
                zone_type, area, method, config.baseline_aspect_ratio, config.baseline_height_ratio
            )
        if result.warning and result.warning not in warnings:
            warnings.append(result.warning)
        return result

    # Corners
    enhanced_corners = analysis.is_required
    corner_type = ZoneType.CORNER_PRIME if enhanced_corners else ZoneType.CORNER
    corner_coeff = coefficient(corner_type, enhanced_corners)
    for suffix, label, x, y in _corner_placements(length, width, c):
        zones.append(PressureZone(
            id=f"corner-{suffix}",
            name=f"{label} Corner (Zone 1')" if enhanced_corners else f"{label} Corner",
            type=corner_type,
            gcp=corner_coeff.gcp,
            area=c * c,
            net_pressure=0.0,
            location=ZoneLocation(x=x, y=y, width=c, height=c),
            is_zone1_prime=enhanced_corners,
            description=(
                f"Enhanced corner zone with {analysis.pressure_increase:g}% increase"
                if enhanced_corners else "Standard corner zone"
            ),
            asce_reference=corner_coeff.source,
            coefficient_interpolated=corner_coeff.interpolated,
        ))

    # Perimeter strips; only one strip is enhanced for highly elongated buildings
    enhanced_strip: Optional[str] = None
    if analysis.is_required and analysis.aspect_ratio >= ZONE1_PRIME_PERIMETER_ASPECT:
        enhanced_strip = "north" if length >= width else "west"

    perimeter_coeff = coefficient(ZoneType.PERIMETER, False)
    for suffix, label, location in _strip_placements(length, width, c, pw):
        if location.width <= 0 or location.height <= 0:
            continue
        enhanced = suffix == enhanced_strip
        coeff = coefficient(ZoneType.PERIMETER_PRIME, True) if enhanced else perimeter_coeff
        zones.append(PressureZone(
            id=f"perimeter-{suffix}-prime" if enhanced else f"perimeter-{suffix}",
            name=f"{label} Perimeter (Zone 1')" if enhanced else f"{label} Perimeter",
            type=ZoneType.PERIMETER_PRIME if enhanced else ZoneType.PERIMETER,
            gcp=coeff.gcp,
            area=location.width * location.height,
            net_pressure=0.0,
            location=location,
            is_zone1_prime=enhanced,
            description=(
                "Enhanced perimeter zone for elongated building"
                if enhanced else "Standard perimeter zone"
            ),
            asce_reference=coeff.source,
            coefficient_interpolated=coeff.interpolated,
        ))

    # Field
    field_length = length - 2 * pw
    field_width = width - 2 * pw
    if field_length > 0 and field_width > 0:
        field_coeff = coefficient(ZoneType.FIELD, False)
        zones.append(PressureZone(
            id="field-center",
            name="Field Zone",
            type=ZoneType.FIELD,
            gcp=field_coeff.gcp,
            area=field_length * field_width,
            net_pressure=0.0,
            location=ZoneLocation(x=pw, y=pw, width=field_length, height=field_width),
            is_zone1_prime=False,
            description="Interior field zone",
            asce_reference=field_coeff.source,
            coefficient_interpolated=field_coeff.interpolated,
        ))
    else:
        logger.info("Perimeter strips cover the footprint - field zone omitted")

    logger.debug(f"Built {len(zones)} zones (corner={c:.2f}', perimeter={pw:.2f}')")
    return zones, warnings
