"""
Data Models for windzone - ASCE 7 Low-Rise Wind Pressure Zones
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any, Tuple, Union

from .constants import DEFAULT_TOPOGRAPHIC_FACTOR, DEFAULT_DIRECTIONALITY_FACTOR
from .errors import InvalidGeometryError


class ExposureCategory(Enum):
    """Surface roughness exposure category (ASCE 7-22 Section 26.7)"""
    B = "B"     # Urban and suburban areas, wooded terrain
    C = "C"     # Open terrain with scattered obstructions
    D = "D"     # Flat unobstructed areas and water surfaces

    @classmethod
    def parse(cls, value: Union["ExposureCategory", str, None]) -> "ExposureCategory":
        """Resolve an exposure label, raising InvalidGeometryError when unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidGeometryError(
            f"Invalid exposure category: {value!r}. Must be B, C, or D."
        )


class CalculationMethod(Enum):
    """Wind load procedure"""
    MAIN_FORCE = "main_force"                   # MWFRS
    COMPONENT_CLADDING = "component_cladding"   # C&C


class ZoneType(Enum):
    """Pressure zone types.

    Prime variants are the Zone 1' enhanced zones for elongated or
    tall-relative-to-width buildings.
    """
    FIELD = "field"
    PERIMETER = "perimeter"
    CORNER = "corner"
    FIELD_PRIME = "field_prime"
    PERIMETER_PRIME = "perimeter_prime"
    CORNER_PRIME = "corner_prime"

    @property
    def is_prime(self) -> bool:
        return self in (ZoneType.FIELD_PRIME, ZoneType.PERIMETER_PRIME, ZoneType.CORNER_PRIME)

    @property
    def base_type(self) -> "ZoneType":
        """Standard zone type for this zone (identity for standard zones)"""
        return _BASE_ZONE_TYPES[self]

    @property
    def prime_type(self) -> "ZoneType":
        """Zone 1' variant for this zone (identity for prime zones)"""
        return _PRIME_ZONE_TYPES[self.base_type]


_BASE_ZONE_TYPES = {
    ZoneType.FIELD: ZoneType.FIELD,
    ZoneType.PERIMETER: ZoneType.PERIMETER,
    ZoneType.CORNER: ZoneType.CORNER,
    ZoneType.FIELD_PRIME: ZoneType.FIELD,
    ZoneType.PERIMETER_PRIME: ZoneType.PERIMETER,
    ZoneType.CORNER_PRIME: ZoneType.CORNER,
}

_PRIME_ZONE_TYPES = {
    ZoneType.FIELD: ZoneType.FIELD_PRIME,
    ZoneType.PERIMETER: ZoneType.PERIMETER_PRIME,
    ZoneType.CORNER: ZoneType.CORNER_PRIME,
}


class BuildingClassificationType(Enum):
    """Plan/height shape classification"""
    COMPACT = "compact"
    ELONGATED = "elongated"
    HIGHLY_ELONGATED = "highly_elongated"
    TOWER = "tower"


class EnclosureType(Enum):
    """Building enclosure classification (ASCE 7-22 Section 26.2)"""
    ENCLOSED = "enclosed"
    PARTIALLY_ENCLOSED = "partially_enclosed"
    OPEN = "open"


class FacadeLocation(Enum):
    """Wall an opening sits in, relative to the design wind direction"""
    WINDWARD = "windward"
    LEEWARD = "leeward"
    SIDE = "side"


class OpeningType(Enum):
    DOOR = "door"
    WINDOW = "window"
    VENT = "vent"
    GARAGE = "garage"
    OTHER = "other"


class GlazingType(Enum):
    """Glazing protection of an opening"""
    NONE = "none"                           # Not glazed
    IMPACT_RATED = "impact_rated"           # Impact-resistant or protected
    NON_IMPACT_RATED = "non_impact_rated"   # Unprotected glazing


class NetPressureMode(Enum):
    """How internal pressure is combined with external pressure.

    ENVELOPE evaluates both GCpi signs and keeps the larger magnitude.
    POSITIVE_INTERNAL_ONLY reproduces the one-sided legacy formula.
    """
    ENVELOPE = "envelope"
    POSITIVE_INTERNAL_ONLY = "positive_internal_only"


class RiskLevel(Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"


@dataclass(frozen=True)
class BuildingClassification:
    """Static wind implications for a building shape class"""
    type: BuildingClassificationType
    description: str
    wind_implications: Tuple[str, ...] = ()
    design_considerations: Tuple[str, ...] = ()
    asce_references: Tuple[str, ...] = ()


@dataclass(frozen=True)
class BuildingGeometry:
    """Rectangular building footprint and height (ft).

    Attributes:
        length: Plan dimension along X (ft)
        width: Plan dimension along Y (ft)
        height: Mean roof height (ft)
        classification: Shape class derived from aspect and height ratios
    """
    length: float
    width: float
    height: float
    classification: BuildingClassification

    @property
    def aspect_ratio(self) -> float:
        """max(L/W, W/L), always >= 1"""
        return max(self.length / self.width, self.width / self.length)

    @property
    def least_horizontal_dimension(self) -> float:
        return min(self.length, self.width)

    @property
    def height_ratio(self) -> float:
        """h/D where D is the across-wind (least) plan dimension"""
        return self.height / self.least_horizontal_dimension

    @property
    def plan_area(self) -> float:
        return self.length * self.width

    @property
    def perimeter(self) -> float:
        return 2 * (self.length + self.width)

    @property
    def gross_wall_area(self) -> float:
        return self.perimeter * self.height


@dataclass(frozen=True)
class RiskFactor:
    factor: str
    severity: str
    description: str
    impact: str
    mitigation: str


@dataclass(frozen=True)
class WindVulnerability:
    """Wind vulnerability assessment from building shape and exposure"""
    overall_risk: RiskLevel
    risk_factors: Tuple[RiskFactor, ...] = ()
    mitigation_strategies: Tuple[str, ...] = ()
    additional_analysis_required: bool = False


@dataclass(frozen=True)
class BuildingOpening:
    """Single wall opening used for enclosure classification.

    Attributes:
        area: Opening area (sq ft)
        location: Facade the opening sits in
        opening_type: Door, window, vent, garage or other
        glazing: Glazing protection
        can_fail: True if the opening may be breached during the design storm
    """
    area: float
    location: FacadeLocation
    opening_type: OpeningType = OpeningType.OTHER
    glazing: GlazingType = GlazingType.NONE
    can_fail: bool = False


@dataclass(frozen=True)
class EnclosureClassification:
    """Enclosure classification and internal pressure coefficients"""
    type: EnclosureType
    gcpi_positive: float
    gcpi_negative: float
    opening_ratio: float = 0.0
    has_dominant_opening: bool = False
    failure_scenario_considered: bool = False
    windward_opening_area: float = 0.0
    total_opening_area: float = 0.0
    warnings: Tuple[str, ...] = ()
    reasoning: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Zone1PrimeTrigger:
    """Single Zone 1' threshold evaluation"""
    type: str               # "aspect_ratio" or "height_ratio"
    triggered: bool
    value: float
    threshold: float
    description: str
    impact: str


@dataclass(frozen=True)
class Zone1PrimeAnalysis:
    """Zone 1' requirement analysis.

    is_required is True exactly when at least one trigger fired.
    """
    is_required: bool
    aspect_ratio: float
    height_ratio: float
    pressure_increase: float    # %
    explanation: str
    asce_reference: str
    triggers: Tuple[Zone1PrimeTrigger, ...] = ()
    warnings: Tuple[str, ...] = ()
    confidence: float = 95.0    # %


@dataclass(frozen=True)
class CoefficientResult:
    """External pressure coefficient lookup result"""
    gcp: float
    interpolated: bool
    source: str
    clamped: bool = False
    warning: Optional[str] = None


@dataclass(frozen=True)
class KzResult:
    """Velocity pressure exposure coefficient result"""
    kz: float
    height_used: float
    formula: str
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class VelocityPressureInputs:
    """Inputs for qz = 0.00256 Kz Kzt Kd V²"""
    wind_speed: float   # mph
    topographic_factor: float = DEFAULT_TOPOGRAPHIC_FACTOR
    directionality_factor: float = DEFAULT_DIRECTIONALITY_FACTOR


@dataclass(frozen=True)
class ZoneDimensions:
    """Governing zone dimensions (ft)"""
    corner_dimension: float
    perimeter_width: float
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ZoneLocation:
    """Axis-aligned rectangle in footprint coordinates (ft), origin at NW corner"""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PressureZone:
    """Pressure zone with its coefficient and net design pressure"""
    id: str
    name: str
    type: ZoneType
    gcp: float
    area: float             # sq ft
    net_pressure: float     # psf, magnitude
    location: ZoneLocation
    is_zone1_prime: bool
    description: str
    asce_reference: str
    coefficient_interpolated: bool = False


@dataclass(frozen=True)
class AffectedArea:
    standard: float = 0.0
    zone1_prime: float = 0.0
    total: float = 0.0


@dataclass(frozen=True)
class PressureBounds:
    """Controlling zone net pressure across both internal pressure cases (psf)"""
    lower: float
    upper: float


@dataclass
class ZonePressureRequest:
    """Inputs for one zone pressure calculation.

    Either velocity_pressure_inputs or a precomputed velocity_pressure must
    be supplied, and either openings or a precomputed enclosure.
    """
    building_length: Optional[float]
    building_width: Optional[float]
    building_height: Optional[float]
    exposure_category: Union[ExposureCategory, str]
    calculation_method: CalculationMethod = CalculationMethod.COMPONENT_CLADDING
    velocity_pressure_inputs: Optional[VelocityPressureInputs] = None
    velocity_pressure: Optional[float] = None     # psf
    openings: Optional[List[BuildingOpening]] = None
    enclosure: Optional[EnclosureClassification] = None
    effective_wind_area: float = 10.0             # sq ft
    zone_effective_areas: Dict[ZoneType, float] = field(default_factory=dict)
    windborne_debris_region: bool = False


@dataclass
class ZoneCalculationResults:
    """Zone pressure calculation results"""
    zones: List[PressureZone]
    zone1_prime_required: bool
    zone1_prime_analysis: Zone1PrimeAnalysis
    max_pressure: float             # psf
    controlling_zone: str
    affected_area: AffectedArea
    professional_notes: List[str] = field(default_factory=list)
    calculations: Dict[str, Any] = field(default_factory=dict)
    geometry: Optional[BuildingGeometry] = None
    enclosure: Optional[EnclosureClassification] = None
    kz_result: Optional[KzResult] = None
    zone_dimensions: Optional[ZoneDimensions] = None
    vulnerability: Optional[WindVulnerability] = None
    warnings: List[str] = field(default_factory=list)
    assumptions: List[str] = field(default_factory=list)
    pressure_bounds: Optional[PressureBounds] = None
    requires_special_analysis: bool = False
    net_pressure_mode: NetPressureMode = NetPressureMode.ENVELOPE
    calculation_steps: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def velocity_pressure(self) -> float:
        return self.calculations.get("velocity_pressure", 0.0)

    @property
    def internal_pressure(self) -> Dict[str, float]:
        return self.calculations.get("internal_pressure", {"positive": 0.0, "negative": 0.0})

    def to_dict(self) -> Dict[str, Any]:
        """Export results as dictionary for JSON serialization"""
        return {
            "zones": [
                {
                    "id": zone.id,
                    "name": zone.name,
                    "type": zone.type.value,
                    "gcp": zone.gcp,
                    "area": zone.area,
                    "net_pressure": zone.net_pressure,
                    "location": {
                        "x": zone.location.x,
                        "y": zone.location.y,
                        "width": zone.location.width,
                        "height": zone.location.height,
                    },
                    "is_zone1_prime": zone.is_zone1_prime,
                    "description": zone.description,
                    "asce_reference": zone.asce_reference,
                }
                for zone in self.zones
            ],
            "zone1_prime_required": self.zone1_prime_required,
            "zone1_prime_analysis": {
                "is_required": self.zone1_prime_analysis.is_required,
                "aspect_ratio": self.zone1_prime_analysis.aspect_ratio,
                "height_ratio": self.zone1_prime_analysis.height_ratio,
                "pressure_increase": self.zone1_prime_analysis.pressure_increase,
                "explanation": self.zone1_prime_analysis.explanation,
                "asce_reference": self.zone1_prime_analysis.asce_reference,
                "confidence": self.zone1_prime_analysis.confidence,
                "triggers": [
                    {
                        "type": trigger.type,
                        "triggered": trigger.triggered,
                        "value": trigger.value,
                        "threshold": trigger.threshold,
                        "description": trigger.description,
                        "impact": trigger.impact,
                    }
                    for trigger in self.zone1_prime_analysis.triggers
                ],
            },
            "max_pressure": self.max_pressure,
            "controlling_zone": self.controlling_zone,
            "affected_area": {
                "standard": self.affected_area.standard,
                "zone1_prime": self.affected_area.zone1_prime,
                "total": self.affected_area.total,
            },
            "professional_notes": list(self.professional_notes),
            "warnings": list(self.warnings),
            "assumptions": list(self.assumptions),
            "calculations": dict(self.calculations),
            "requires_special_analysis": self.requires_special_analysis,
            "net_pressure_mode": self.net_pressure_mode.value,
        }
