"""
Building Aspect Analysis
Derives aspect ratio, height ratio and shape classification, and assesses
wind vulnerability for a rectangular building.
"""

import math
from typing import List, Union

from ..core.constants import (
    ELONGATED_ASPECT_RATIO,
    HIGHLY_ELONGATED_ASPECT_RATIO,
    TOWER_HEIGHT,
    TOWER_HEIGHT_RATIO,
)
from ..core.data_models import (
    BuildingClassification,
    BuildingClassificationType,
    BuildingGeometry,
    ExposureCategory,
    RiskFactor,
    RiskLevel,
    WindVulnerability,
)
from ..core.errors import InvalidGeometryError


BUILDING_CLASSIFICATIONS = {
    BuildingClassificationType.TOWER: BuildingClassification(
        type=BuildingClassificationType.TOWER,
        description="High-rise tower building",
        wind_implications=(
            "Vortex shedding potential",
            "Galloping and flutter susceptibility",
            "Dynamic wind effects dominant",
            "Acceleration response critical",
        ),
        design_considerations=(
            "Wind tunnel testing recommended",
            "Dynamic analysis required",
            "Comfort criteria evaluation needed",
            "Detailed facade pressure analysis",
        ),
        asce_references=(
            "ASCE 7-22 Chapter 31 - Wind Tunnel Procedure",
            "ASCE 7-22 Section 26.11 - Dynamic Response",
        ),
    ),
    BuildingClassificationType.HIGHLY_ELONGATED: BuildingClassification(
        type=BuildingClassificationType.HIGHLY_ELONGATED,
        description="Highly elongated low-rise building",
        wind_implications=(
            "Severe corner wind acceleration",
            "Zone 1' pressures mandatory",
            "End wall vortex formation",
            "Crosswind galloping potential",
        ),
        design_considerations=(
            "Zone 1' pressure coefficients required",
            "Enhanced corner fastening needed",
            "End wall reinforcement critical",
            "Consideration of wind tunnel testing",
        ),
        asce_references=(
            "ASCE 7-22 Figure 26.11-1A (Zone 1')",
            "ASCE 7-22 Section 26.11.1",
        ),
    ),
    BuildingClassificationType.ELONGATED: BuildingClassification(
        type=BuildingClassificationType.ELONGATED,
        description="Elongated low-rise building",
        wind_implications=(
            "Corner wind acceleration",
            "Zone 1' pressures likely required",
            "Flow reattachment along sides",
            "Increased corner suction",
        ),
        design_considerations=(
            "Evaluate Zone 1' requirements",
            "Enhanced corner detailing",
            "Careful pressure coefficient selection",
            "Consider building orientation",
        ),
        asce_references=(
            "ASCE 7-22 Figure 26.11-1A",
            "ASCE 7-22 Section 26.11",
        ),
    ),
    BuildingClassificationType.COMPACT: BuildingClassification(
        type=BuildingClassificationType.COMPACT,
        description="Compact rectangular building",
        wind_implications=(
            "Standard wind flow patterns",
            "Predictable pressure distribution",
            "Well-understood aerodynamics",
            "Standard zone definitions apply",
        ),
        design_considerations=(
            "Standard ASCE 7 procedures applicable",
            "Normal pressure coefficients",
            "Straightforward zone layout",
            "Conventional fastening patterns",
        ),
        asce_references=(
            "ASCE 7-22 Figure 26.11-1",
            "ASCE 7-22 Section 26.11",
        ),
    ),
}


def validate_dimensions(length: float, width: float, height: float) -> None:
    """Raise InvalidGeometryError for missing, non-finite or non-positive dimensions"""
    for name, value in (("length", length), ("width", width), ("height", height)):
        if value is None:
            raise InvalidGeometryError(f"Building {name} is required")
        if not math.isfinite(value):
            raise InvalidGeometryError(f"Building {name} must be a finite number, got {value!r}")
        if value <= 0:
            raise InvalidGeometryError(f"Building {name} must be positive, got {value}")


def classify_building(aspect_ratio: float, height_ratio: float, height: float) -> BuildingClassification:
    """Classify building shape from its ratios"""
    if height_ratio >= TOWER_HEIGHT_RATIO or height >= TOWER_HEIGHT:
        return BUILDING_CLASSIFICATIONS[BuildingClassificationType.TOWER]
    if aspect_ratio >= HIGHLY_ELONGATED_ASPECT_RATIO:
        return BUILDING_CLASSIFICATIONS[BuildingClassificationType.HIGHLY_ELONGATED]
    if aspect_ratio >= ELONGATED_ASPECT_RATIO:
        return BUILDING_CLASSIFICATIONS[BuildingClassificationType.ELONGATED]
    return BUILDING_CLASSIFICATIONS[BuildingClassificationType.COMPACT]


def analyze_building_geometry(length: float, width: float, height: float) -> BuildingGeometry:
    """Build an immutable BuildingGeometry with its shape classification.

    Raises:
        InvalidGeometryError: If any dimension is missing or non-positive.
    """
    validate_dimensions(length, width, height)

    aspect_ratio = max(length / width, width / length)
    height_ratio = height / min(length, width)

    return BuildingGeometry(
        length=length,
        width=width,
        height=height,
        classification=classify_building(aspect_ratio, height_ratio, height),
    )


def assess_wind_vulnerability(
    geometry: BuildingGeometry,
    exposure: Union[ExposureCategory, str],
) -> WindVulnerability:
    """
    Assess wind vulnerability from aspect ratio, height ratio and exposure.
    Critical factors or two high factors give extreme risk.
    """
    category = ExposureCategory.parse(exposure)
    aspect_ratio = geometry.aspect_ratio
    height_ratio = geometry.height_ratio
    risk_factors: List[RiskFactor] = []

    if aspect_ratio >= 4.0:
        risk_factors.append(RiskFactor(
            factor="Extreme Aspect Ratio",
            severity="critical",
            description=f"Building is {aspect_ratio:.1f} times longer than wide",
            impact="Severe corner pressure amplification and potential dynamic effects",
            mitigation="Wind tunnel testing, enhanced fastening, structural analysis",
        ))
    elif aspect_ratio >= 2.5:
        risk_factors.append(RiskFactor(
            factor="High Aspect Ratio",
            severity="high",
            description=f"Building is {aspect_ratio:.1f} times longer than wide",
            impact="Significant corner pressure increase requiring Zone 1' analysis",
            mitigation="Apply Zone 1' pressure coefficients and enhanced corner design",
        ))
    elif aspect_ratio >= 2.0:
        risk_factors.append(RiskFactor(
            factor="Moderate Aspect Ratio",
            severity="moderate",
            description=f"Building is {aspect_ratio:.1f} times longer than wide",
            impact="Corner pressure enhancement likely required",
            mitigation="Evaluate Zone 1' requirements case by case",
        ))

    if height_ratio >= 2.0:
        risk_factors.append(RiskFactor(
            factor="High Height-to-Width Ratio",
            severity="high",
            description=f"Building height is {height_ratio:.1f} times the across-wind dimension",
            impact="Enhanced wind effects and potential dynamic response",
            mitigation="Consider dynamic analysis and enhanced design factors",
        ))
    elif height_ratio >= 1.0:
        risk_factors.append(RiskFactor(
            factor="Moderate Height-to-Width Ratio",
            severity="moderate",
            description="Building height equals or exceeds across-wind dimension",
            impact="Amplified corner effects and flow complexity",
            mitigation="Apply enhanced pressure coefficients",
        ))

    if category in (ExposureCategory.C, ExposureCategory.D) and aspect_ratio >= 2.0:
        risk_factors.append(RiskFactor(
            factor="Open Terrain Exposure",
            severity="moderate",
            description=f"Exposure Category {category.value} amplifies elongated building effects",
            impact="Increased wind speeds and less turbulence dampening",
            mitigation="Apply exposure-enhanced pressure coefficients",
        ))

    critical = sum(1 for f in risk_factors if f.severity == "critical")
    high = sum(1 for f in risk_factors if f.severity == "high")
    moderate = sum(1 for f in risk_factors if f.severity == "moderate")

    if critical > 0 or high >= 2:
        overall_risk = RiskLevel.EXTREME
    elif high >= 1 or moderate >= 2:
        overall_risk = RiskLevel.HIGH
    elif moderate >= 1:
        overall_risk = RiskLevel.MODERATE
    else:
        overall_risk = RiskLevel.LOW

    additional_analysis = (
        overall_risk == RiskLevel.EXTREME
        or (overall_risk == RiskLevel.HIGH and aspect_ratio >= 3.0)
        or height_ratio >= 2.0
    )

    strategies: List[str] = []
    if aspect_ratio >= 4.0:
        strategies.append("Recommend wind tunnel testing for pressure coefficient validation")
        strategies.append("Consider building segmentation to reduce effective aspect ratio")
    elif aspect_ratio >= 2.0:
        strategies.append("Apply Zone 1' pressure coefficients per ASCE 7-22 Figure 26.11-1A")
        strategies.append("Verify edge metal and coping attachment adequacy")
    if height_ratio >= 1.5:
        strategies.append("Consider dynamic wind effects in structural analysis")
    if critical > 0:
        strategies.append("Engage wind engineering specialist for detailed analysis")

    return WindVulnerability(
        overall_risk=overall_risk,
        risk_factors=tuple(risk_factors),
        mitigation_strategies=tuple(strategies),
        additional_analysis_required=additional_analysis,
    )
