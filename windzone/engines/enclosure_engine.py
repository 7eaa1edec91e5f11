"""
Building Enclosure Classification - ASCE 7-22 Section 26.2 / Table 26.13-1
Derives enclosure type and internal pressure coefficients from an opening inventory.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..core.constants import (
    DOMINANT_OPENING_FACTOR,
    INTERNAL_PRESSURE_COEFFICIENTS,
    LARGE_OPENING_FRACTION,
    MAX_OTHER_OPENING_RATIO,
    MIN_DOMINANT_OPENING_AREA,
    MIN_DOMINANT_OPENING_FRACTION,
    OPEN_BUILDING_RATIO,
)
from ..core.data_models import (
    BuildingOpening,
    EnclosureClassification,
    EnclosureType,
    FacadeLocation,
    GlazingType,
)
from ..core.errors import LOW_CONFIDENCE_CLASSIFICATION, tagged

logger = logging.getLogger(__name__)


def internal_pressure_for(enclosure_type: EnclosureType) -> Tuple[float, float]:
    """Standard (GCpi+, GCpi-) pair for an enclosure type"""
    return INTERNAL_PRESSURE_COEFFICIENTS[enclosure_type.value]


def _default_enclosed(reason: str, total: float = 0.0, windward: float = 0.0,
                      opening_ratio: float = 0.0) -> EnclosureClassification:
    positive, negative = internal_pressure_for(EnclosureType.ENCLOSED)
    logger.warning(f"Enclosure defaulted to enclosed: {reason}")
    return EnclosureClassification(
        type=EnclosureType.ENCLOSED,
        gcpi_positive=positive,
        gcpi_negative=negative,
        opening_ratio=opening_ratio,
        windward_opening_area=windward,
        total_opening_area=total,
        warnings=(tagged(
            LOW_CONFIDENCE_CLASSIFICATION,
            f"{reason} - building assumed enclosed; verify opening inventory",
        ),),
        reasoning=("Default classification applied (enclosed)",),
    )


def _is_failable_glazing(opening: BuildingOpening) -> bool:
    return (
        opening.location == FacadeLocation.WINDWARD
        and opening.glazing == GlazingType.NON_IMPACT_RATED
        and opening.can_fail
    )


def classify_enclosure(
    openings: Optional[Sequence[BuildingOpening]],
    length: float,
    width: float,
    height: float,
    windborne_debris_region: bool = False,
    apply_failure_scenario: bool = False,
) -> EnclosureClassification:
    """
    Classify building enclosure per ASCE 7-22 Section 26.2.

    Wall areas are derived from the rectangular envelope:
        A_wall = 2 × (L + W) × H       (gross wall area)
        A_g    = max(L, W) × H         (windward wall, longer face)

    Open:                A_total / A_wall > 0.80
    Partially enclosed:  A_o > 1.1 × A_oi
                         and A_o > min(4 sq ft, 0.01 × A_g)
                         and A_oi / A_gi ≤ 0.20
    Enclosed:            otherwise

    Args:
        openings: Opening inventory (None or empty defaults to enclosed)
        length, width, height: Building dimensions (ft)
        windborne_debris_region: Site is in a windborne debris region
        apply_failure_scenario: Use partially enclosed GCpi when a glazing
            failure scenario is flagged

    Returns:
        EnclosureClassification with GCpi pair and warnings
    """
    gross_wall_area = 2 * (length + width) * height
    windward_wall_area = max(length, width) * height
    other_wall_area = gross_wall_area - windward_wall_area

    if not openings:
        return _default_enclosed("No opening inventory provided")

    if any(opening.area < 0 for opening in openings):
        return _default_enclosed("Opening inventory contains negative areas")

    total_area = sum(opening.area for opening in openings)
    windward_area = sum(
        opening.area for opening in openings if opening.location == FacadeLocation.WINDWARD
    )
    other_area = total_area - windward_area
    opening_ratio = total_area / gross_wall_area

    if total_area > gross_wall_area or windward_area > windward_wall_area:
        return _default_enclosed(
            f"Opening area ({total_area:.0f} sq ft) inconsistent with wall area "
            f"({gross_wall_area:.0f} sq ft)",
            total=total_area,
            windward=windward_area,
            opening_ratio=opening_ratio,
        )

    warnings: List[str] = []
    reasoning: List[str] = [
        f"Total opening area {total_area:.1f} sq ft = {opening_ratio * 100:.2f}% "
        f"of gross wall area {gross_wall_area:.0f} sq ft",
        f"Windward opening area {windward_area:.1f} sq ft vs other openings "
        f"{other_area:.1f} sq ft",
    ]

    min_dominant_area = min(MIN_DOMINANT_OPENING_AREA, MIN_DOMINANT_OPENING_FRACTION * windward_wall_area)
    other_ratio = other_area / other_wall_area if other_wall_area > 0 else 0.0
    has_dominant_opening = (
        windward_area > DOMINANT_OPENING_FACTOR * other_area
        and windward_area > min_dominant_area
    )

    # Glazing failure scenario
    failure_considered = False
    if windborne_debris_region:
        failable = [o for o in openings if _is_failable_glazing(o)]
        if failable:
            failure_considered = True
            failable_area = sum(o.area for o in failable)
            warnings.append(
                f"Failure scenario: {failable_area:.0f} sq ft of non-impact-rated windward "
                f"glazing in a windborne debris region may fail and create a dominant opening"
            )

    for opening in openings:
        if opening.area >= LARGE_OPENING_FRACTION * windward_wall_area:
            warnings.append(
                f"Large opening: {opening.opening_type.value} of {opening.area:.0f} sq ft "
                f"({opening.area / windward_wall_area * 100:.0f}% of windward wall)"
            )

    if opening_ratio > OPEN_BUILDING_RATIO:
        enclosure_type = EnclosureType.OPEN
        reasoning.append(
            f"Opening ratio {opening_ratio:.2f} exceeds {OPEN_BUILDING_RATIO:.2f} - open building"
        )
        warnings.append(
            f"Building opening ratio exceeds {OPEN_BUILDING_RATIO * 100:.0f}% - classified as open"
        )
    elif has_dominant_opening and other_ratio <= MAX_OTHER_OPENING_RATIO:
        enclosure_type = EnclosureType.PARTIALLY_ENCLOSED
        reasoning.append(
            f"Windward opening area exceeds {DOMINANT_OPENING_FACTOR} × other openings and "
            f"min({MIN_DOMINANT_OPENING_AREA:g} sq ft, 1% of windward wall) - partially enclosed"
        )
        warnings.append("Building has dominant opening - classified as partially enclosed")
    else:
        enclosure_type = EnclosureType.ENCLOSED
        reasoning.append("Opening distribution meets enclosed building definition")

    if (
        failure_considered
        and apply_failure_scenario
        and enclosure_type == EnclosureType.ENCLOSED
    ):
        enclosure_type = EnclosureType.PARTIALLY_ENCLOSED
        has_dominant_opening = True
        reasoning.append("Glazing failure scenario applied - partially enclosed")
        warnings.append(
            "Glazing failure scenario applied - building classified as partially enclosed"
        )

    positive, negative = internal_pressure_for(enclosure_type)

    logger.info(
        f"Enclosure classified as {enclosure_type.value} "
        f"(opening ratio {opening_ratio:.3f}, GCpi ±{positive:.2f})"
    )

    return EnclosureClassification(
        type=enclosure_type,
        gcpi_positive=positive,
        gcpi_negative=negative,
        opening_ratio=opening_ratio,
        has_dominant_opening=has_dominant_opening,
        failure_scenario_considered=failure_considered,
        windward_opening_area=windward_area,
        total_opening_area=total_area,
        warnings=tuple(warnings),
        reasoning=tuple(reasoning),
    )
