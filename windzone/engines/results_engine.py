"""
Results Aggregation
Selects the controlling zone and assembles notes, warnings, assumptions and
pressure bounds into ZoneCalculationResults.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..core.constants import (
    DYNAMIC_ANALYSIS_HEIGHT,
    DYNAMIC_HEIGHT_RATIO,
    EXPOSURE_B_HEIGHT_LIMIT,
    EXPOSURE_D_LOW_HEIGHT,
    EXPOSURE_D_UNCOMMON_HEIGHT,
    HIGH_WIND_SPEED,
    MIN_TYPICAL_PLAN_DIMENSION,
    SIMPLIFIED_HEIGHT_LIMIT,
    TYPICAL_PLAN_DIMENSION_LIMIT,
    UNUSUAL_ASPECT_RATIO,
)
from ..core.data_models import (
    AffectedArea,
    BuildingClassificationType,
    BuildingGeometry,
    EnclosureClassification,
    ExposureCategory,
    KzResult,
    NetPressureMode,
    PressureBounds,
    PressureZone,
    WindVulnerability,
    Zone1PrimeAnalysis,
    ZoneCalculationResults,
    ZoneDimensions,
)
from ..core.errors import SIMPLIFIED_METHOD_EXCEEDED, tagged
from .pressure_engine import internal_pressure_cases

logger = logging.getLogger(__name__)


def special_analysis_reasons(geometry: BuildingGeometry) -> List[str]:
    """Reasons the building falls outside the low-rise simplified procedure"""
    reasons = []
    if geometry.height > SIMPLIFIED_HEIGHT_LIMIT:
        reasons.append(f"mean roof height {geometry.height:g}' exceeds {SIMPLIFIED_HEIGHT_LIMIT:g}'")
    if geometry.height > geometry.least_horizontal_dimension:
        reasons.append(
            f"height exceeds least horizontal dimension {geometry.least_horizontal_dimension:g}'"
        )
    if geometry.classification.type == BuildingClassificationType.TOWER:
        reasons.append("tower classification")
    if max(geometry.length, geometry.width) > TYPICAL_PLAN_DIMENSION_LIMIT:
        reasons.append(f"plan dimension exceeds {TYPICAL_PLAN_DIMENSION_LIMIT:g}'")
    return reasons


def consistency_warnings(
    geometry: BuildingGeometry,
    exposure: Optional[ExposureCategory] = None,
    wind_speed: Optional[float] = None,
) -> List[str]:
    """Cross-checks of dimensions, exposure and wind speed that merit verification"""
    warnings = []
    least = geometry.least_horizontal_dimension

    if geometry.aspect_ratio > UNUSUAL_ASPECT_RATIO:
        warnings.append(
            f"Building aspect ratio of {geometry.aspect_ratio:.1f}:1 is unusual. "
            f"Verify wind directionality effects."
        )
    if geometry.height_ratio > DYNAMIC_HEIGHT_RATIO:
        warnings.append(
            f"Building height-to-width ratio of {geometry.height_ratio:.1f}:1 may require "
            f"special consideration for dynamic effects."
        )
    if least < MIN_TYPICAL_PLAN_DIMENSION:
        warnings.append(
            "Very small building dimensions may not be suitable for ASCE 7 main wind force procedures."
        )

    if exposure == ExposureCategory.B and geometry.height > EXPOSURE_B_HEIGHT_LIMIT:
        warnings.append(
            f"Exposure B is rarely applicable for buildings over {EXPOSURE_B_HEIGHT_LIMIT:g} feet. "
            f"Verify terrain conditions within 2600 feet."
        )
    if exposure == ExposureCategory.D:
        if geometry.height < EXPOSURE_D_LOW_HEIGHT:
            warnings.append(
                "Exposure D for low buildings should be verified - consider if building "
                "is actually in coastal area."
            )
        elif geometry.height < EXPOSURE_D_UNCOMMON_HEIGHT:
            warnings.append(
                "Low buildings in Exposure D are uncommon. Verify coastal/open terrain conditions."
            )

    if wind_speed is not None and wind_speed > HIGH_WIND_SPEED:
        warnings.append(
            f"Wind speeds above {HIGH_WIND_SPEED:g} mph require special consideration "
            f"and may exceed typical structural capabilities."
        )
    if geometry.height > DYNAMIC_ANALYSIS_HEIGHT:
        warnings.append(
            f"Buildings over {DYNAMIC_ANALYSIS_HEIGHT:g} feet may require dynamic analysis "
            f"per ASCE 7 Section 26.11."
        )
    return warnings


def _geometry_warnings(geometry: BuildingGeometry) -> List[str]:
    warnings = []
    if geometry.height > geometry.least_horizontal_dimension:
        warnings.append(tagged(
            SIMPLIFIED_METHOD_EXCEEDED,
            f"Mean roof height {geometry.height:g}' exceeds least horizontal dimension "
            f"{geometry.least_horizontal_dimension:g}' - low-rise zone layout may not apply",
        ))
    if max(geometry.length, geometry.width) > TYPICAL_PLAN_DIMENSION_LIMIT:
        warnings.append(tagged(
            SIMPLIFIED_METHOD_EXCEEDED,
            f"Plan dimension exceeds {TYPICAL_PLAN_DIMENSION_LIMIT}' - verify applicability",
        ))
    if geometry.classification.type == BuildingClassificationType.TOWER:
        warnings.append(tagged(
            SIMPLIFIED_METHOD_EXCEEDED,
            "Tower classification - dynamic wind effects are outside this procedure",
        ))
    return warnings


def _unique(messages: Iterable[str]) -> List[str]:
    seen = set()
    ordered = []
    for message in messages:
        if message not in seen:
            seen.add(message)
            ordered.append(message)
    return ordered


def aggregate_results(
    zones: List[PressureZone],
    geometry: BuildingGeometry,
    analysis: Zone1PrimeAnalysis,
    dimensions: ZoneDimensions,
    velocity_pressure: float,
    enclosure: EnclosureClassification,
    mode: NetPressureMode,
    kz_result: Optional[KzResult] = None,
    vulnerability: Optional[WindVulnerability] = None,
    coefficient_warnings: Optional[List[str]] = None,
    calculation_steps: Optional[List[Dict[str, Any]]] = None,
    exposure: Optional[ExposureCategory] = None,
    wind_speed: Optional[float] = None,
) -> ZoneCalculationResults:
    """
    Assemble the final result.

    max_pressure is the largest zone net pressure; the controlling zone is
    the first zone in emission order attaining it.
    """
    if not zones:
        raise ValueError("At least one pressure zone is required")

    # max() keeps the first of equal keys
    controlling = max(zones, key=lambda zone: abs(zone.net_pressure))
    max_pressure = abs(controlling.net_pressure)

    prime_area = sum(zone.area for zone in zones if zone.is_zone1_prime)
    standard_area = sum(zone.area for zone in zones if not zone.is_zone1_prime)
    affected_area = AffectedArea(
        standard=standard_area,
        zone1_prime=prime_area,
        total=standard_area + prime_area,
    )

    positive_case, negative_case = internal_pressure_cases(
        velocity_pressure, controlling.gcp, enclosure.gcpi_positive, enclosure.gcpi_negative
    )
    bounds = PressureBounds(lower=min(positive_case, negative_case), upper=max(positive_case, negative_case))

    special_reasons = special_analysis_reasons(geometry)
    special_analysis = bool(special_reasons)

    notes = [
        f"Corner zone dimension: {dimensions.corner_dimension:.1f}' per ASCE 7-22",
        f"Perimeter zone width: {dimensions.perimeter_width:.1f}' per ASCE 7-22",
    ]
    if analysis.is_required:
        notes.append(f"Zone 1' required: {analysis.explanation}")
    else:
        notes.append("Standard zones apply - no Zone 1' enhancement required")
    notes.append(f"Zone 1' detection confidence: {analysis.confidence:g}%")
    notes.append(f"Controlling zone: {controlling.name} at {max_pressure:.1f} psf")
    if mode == NetPressureMode.ENVELOPE:
        notes.append("Net pressures govern over both positive and negative internal pressure cases")
    else:
        notes.append("Net pressures use positive internal pressure only (compatibility mode)")
    if special_analysis:
        notes.append(f"Special wind analysis required: {'; '.join(special_reasons)}")

    warnings = _unique(
        (list(kz_result.warnings) if kz_result else [])
        + list(enclosure.warnings)
        + list(analysis.warnings)
        + list(dimensions.warnings)
        + list(coefficient_warnings or [])
        + _geometry_warnings(geometry)
        + consistency_warnings(geometry, exposure, wind_speed)
    )

    assumptions = [
        "Rectangular footprint with flat or low-slope roof",
        f"Enclosure: {enclosure.type.value.replace('_', ' ')} "
        f"(GCpi = +{enclosure.gcpi_positive:.2f} / {enclosure.gcpi_negative:.2f})",
        f"Velocity pressure evaluated at mean roof height: {velocity_pressure:.2f} psf",
        "Net pressures reported as magnitudes",
    ]

    if special_analysis:
        logger.warning(f"{geometry.length:g}' × {geometry.width:g}' × {geometry.height:g}' building "
                       f"requires special wind analysis")

    logger.info(f"Controlling zone {controlling.name} at {max_pressure:.2f} psf over {len(zones)} zones")

    return ZoneCalculationResults(
        zones=zones,
        zone1_prime_required=analysis.is_required,
        zone1_prime_analysis=analysis,
        max_pressure=max_pressure,
        controlling_zone=controlling.name,
        affected_area=affected_area,
        professional_notes=notes,
        calculations={
            "velocity_pressure": velocity_pressure,
            "internal_pressure": {
                "positive": enclosure.gcpi_positive,
                "negative": enclosure.gcpi_negative,
            },
        },
        geometry=geometry,
        enclosure=enclosure,
        kz_result=kz_result,
        zone_dimensions=dimensions,
        vulnerability=vulnerability,
        warnings=warnings,
        assumptions=assumptions,
        pressure_bounds=bounds,
        requires_special_analysis=special_analysis,
        net_pressure_mode=mode,
        calculation_steps=list(calculation_steps or []),
    )


def get_zone_calculation_summary(results: ZoneCalculationResults) -> str:
    """One-paragraph summary of a zone calculation"""
    analysis = results.zone1_prime_analysis
    area = results.affected_area

    summary = "Pressure zone analysis complete for building. "
    if results.zone1_prime_required:
        share = area.zone1_prime / area.total * 100 if area.total > 0 else 0.0
        summary += f"Zone 1' enhancement required ({analysis.aspect_ratio:.1f}:1 aspect ratio, h/D {analysis.height_ratio:.2f}). "
        summary += f"Enhanced zones cover {area.zone1_prime:.0f} sq ft ({share:.1f}% of roof). "
        summary += f"Pressure increase: {analysis.pressure_increase:g}%. "
    else:
        summary += "Standard zones apply - no Zone 1' enhancement required. "

    summary += f"Controlling zone: {results.controlling_zone} at {results.max_pressure:.1f} psf. "
    summary += f"Total analyzed area: {area.total:.0f} sq ft across {len(results.zones)} zones."
    return summary
