"""
Zone 1' Detection - ASCE 7-22 Figure 26.11-1A
Decides whether enhanced corner/perimeter pressures are required for an
elongated or tall-relative-to-width building, and by how much.
"""

import logging
from typing import List, Union

from ..core.constants import (
    ASPECT_BASE_INCREASE,
    DEFAULT_EFFECTIVE_WIND_AREA,
    HEIGHT_BASE_INCREASE,
    INCREASE_PER_UNIT_RATIO,
    LARGE_AREA_CONFIDENCE_PENALTY,
    LARGE_EFFECTIVE_AREA,
    MAX_PRESSURE_INCREASE,
    OPEN_TERRAIN_BONUS,
    ZONE1_PRIME_ASPECT_THRESHOLD,
    ZONE1_PRIME_CLEAR_ASPECT,
    ZONE1_PRIME_CLEAR_CONFIDENCE,
    ZONE1_PRIME_CLEAR_HEIGHT,
    ZONE1_PRIME_CONFIDENCE,
    ZONE1_PRIME_HEIGHT_THRESHOLD,
)
from ..core.data_models import (
    BuildingGeometry,
    ExposureCategory,
    Zone1PrimeAnalysis,
    Zone1PrimeTrigger,
)

logger = logging.getLogger(__name__)

ZONE1_PRIME_REFERENCE = "ASCE 7-16/7-22 Figure 26.11-1A, Section 26.11.1"


def qualifies_for_zone1_prime(aspect_ratio: float, height_ratio: float) -> bool:
    """Both thresholds are inclusive"""
    return (
        aspect_ratio >= ZONE1_PRIME_ASPECT_THRESHOLD
        or height_ratio >= ZONE1_PRIME_HEIGHT_THRESHOLD
    )


def calculate_pressure_increase(
    aspect_ratio: float,
    height_ratio: float,
    exposure: ExposureCategory,
) -> float:
    """
    Zone 1' pressure increase (%).
    Aspect-governed:  20 + 10 × (AR - 2.0)
    Height-governed:  15 + 10 × (h/D - 1.0)
    The larger governs, +5% in open terrain (C/D) when the aspect trigger
    fires, capped at 40%.
    """
    aspect_triggered = aspect_ratio >= ZONE1_PRIME_ASPECT_THRESHOLD
    height_triggered = height_ratio >= ZONE1_PRIME_HEIGHT_THRESHOLD
    if not (aspect_triggered or height_triggered):
        return 0.0

    increase = 0.0
    if aspect_triggered:
        increase = ASPECT_BASE_INCREASE + INCREASE_PER_UNIT_RATIO * (
            aspect_ratio - ZONE1_PRIME_ASPECT_THRESHOLD
        )
    if height_triggered:
        increase = max(increase, HEIGHT_BASE_INCREASE + INCREASE_PER_UNIT_RATIO * (
            height_ratio - ZONE1_PRIME_HEIGHT_THRESHOLD
        ))
    if aspect_triggered and exposure in (ExposureCategory.C, ExposureCategory.D):
        increase += OPEN_TERRAIN_BONUS

    return round(min(increase, MAX_PRESSURE_INCREASE), 1)


def _build_explanation(geometry: BuildingGeometry, analysis_required: bool,
                       pressure_increase: float) -> str:
    aspect_ratio = geometry.aspect_ratio
    height_ratio = geometry.height_ratio
    size = f"{geometry.length:g}' × {geometry.width:g}'"

    if not analysis_required:
        return (
            f"This {size} building has a {aspect_ratio:.1f}:1 aspect ratio and "
            f"h/D of {height_ratio:.2f}, which creates standard wind flow patterns. "
            f"Zone 1' enhanced pressures are not required."
        )

    parts: List[str] = []
    if aspect_ratio >= ZONE1_PRIME_ASPECT_THRESHOLD:
        parts.append(
            f"This {size} building requires Zone 1' enhanced pressures because it is "
            f"{aspect_ratio:.1f} times longer than wide. "
        )
        if aspect_ratio >= 3.0:
            parts.append("Highly elongated buildings create significant wind acceleration around corners, ")
        elif aspect_ratio >= 2.5:
            parts.append("Elongated buildings cause wind to accelerate around corners, ")
        else:
            parts.append("The building geometry causes enhanced wind effects at corners, ")
    else:
        parts.append(
            f"This {size} building requires Zone 1' enhanced pressures because its height "
            f"is {height_ratio:.1f} times the across-wind dimension, "
        )
    parts.append(f"resulting in {pressure_increase:g}% higher loads than standard calculations. ")

    if aspect_ratio >= ZONE1_PRIME_ASPECT_THRESHOLD and height_ratio >= ZONE1_PRIME_HEIGHT_THRESHOLD:
        parts.append(f"The building's height ({height_ratio:.1f}× the width) further amplifies these effects. ")
    parts.append(f"See {ZONE1_PRIME_REFERENCE}.")
    return "".join(parts)


def detection_confidence(aspect_ratio: float, height_ratio: float,
                         effective_wind_area: float = DEFAULT_EFFECTIVE_WIND_AREA) -> float:
    """
    Confidence (%) in the Zone 1' decision.
    Lower for buildings well clear of both triggers, and for large
    effective wind areas where the enhanced coefficients are less certain.
    """
    confidence = ZONE1_PRIME_CONFIDENCE
    if aspect_ratio < ZONE1_PRIME_CLEAR_ASPECT and height_ratio < ZONE1_PRIME_CLEAR_HEIGHT:
        confidence = ZONE1_PRIME_CLEAR_CONFIDENCE
    if effective_wind_area > LARGE_EFFECTIVE_AREA:
        confidence -= LARGE_AREA_CONFIDENCE_PENALTY
    return confidence


def analyze_zone1_prime(
    geometry: BuildingGeometry,
    exposure: Union[ExposureCategory, str],
    effective_wind_area: float = DEFAULT_EFFECTIVE_WIND_AREA,
) -> Zone1PrimeAnalysis:
    """Evaluate the aspect-ratio and height-ratio triggers for Zone 1'."""
    category = ExposureCategory.parse(exposure)
    aspect_ratio = geometry.aspect_ratio
    height_ratio = geometry.height_ratio

    aspect_triggered = aspect_ratio >= ZONE1_PRIME_ASPECT_THRESHOLD
    height_triggered = height_ratio >= ZONE1_PRIME_HEIGHT_THRESHOLD

    triggers = [
        Zone1PrimeTrigger(
            type="aspect_ratio",
            triggered=aspect_triggered,
            value=aspect_ratio,
            threshold=ZONE1_PRIME_ASPECT_THRESHOLD,
            description="Building aspect ratio (L/W or W/L)",
            impact=(
                f"{aspect_ratio:.1f}:1 ratio creates wind acceleration at corners"
                if aspect_triggered else "Standard wind flow patterns"
            ),
        ),
        Zone1PrimeTrigger(
            type="height_ratio",
            triggered=height_triggered,
            value=height_ratio,
            threshold=ZONE1_PRIME_HEIGHT_THRESHOLD,
            description="Height to across-wind dimension ratio (h/D)",
            impact=(
                "Tall building enhances corner wind effects"
                if height_triggered else "Low-profile building"
            ),
        ),
    ]

    is_required = any(trigger.triggered for trigger in triggers)
    pressure_increase = calculate_pressure_increase(aspect_ratio, height_ratio, category)

    warnings: List[str] = []
    if is_required and pressure_increase > 25:
        warnings.append("High pressure increase detected - requires professional engineering review")
    if aspect_ratio >= 4.0:
        warnings.append("Extremely elongated building - consider wind tunnel testing")
    if height_ratio >= 2.0:
        warnings.append("Very tall building - additional analysis may be required")

    if is_required:
        logger.info(
            f"Zone 1' required (AR={aspect_ratio:.2f}, h/D={height_ratio:.2f}, "
            f"+{pressure_increase:g}%)"
        )

    return Zone1PrimeAnalysis(
        is_required=is_required,
        aspect_ratio=aspect_ratio,
        height_ratio=height_ratio,
        pressure_increase=pressure_increase,
        explanation=_build_explanation(geometry, is_required, pressure_increase),
        asce_reference=ZONE1_PRIME_REFERENCE,
        triggers=tuple(triggers),
        warnings=tuple(warnings),
        confidence=detection_confidence(aspect_ratio, height_ratio, effective_wind_area),
    )
