"""
Zone Pressure Calculator - ASCE 7-22 Chapters 26 and 30
Orchestrates Kz/qz, enclosure, Zone 1' detection, zone layout and net
pressures into one ZoneCalculationResults.
"""

import logging
import math
from typing import Any, Dict, List

from ..core.config import EngineConfig
from ..core.constants import DEFAULT_EFFECTIVE_WIND_AREA
from ..core.data_models import (
    EnclosureClassification,
    ExposureCategory,
    KzResult,
    ZoneCalculationResults,
    ZonePressureRequest,
    ZoneType,
)
from ..core.errors import INVALID_VELOCITY_INPUT, InvalidRequestError, tagged
from .aspect_engine import analyze_building_geometry, assess_wind_vulnerability
from .enclosure_engine import classify_enclosure
from .exposure_engine import calculate_kz, calculate_velocity_pressure, velocity_pressure_warnings
from .pressure_engine import apply_net_pressures
from .results_engine import aggregate_results
from .zone1_prime_engine import analyze_zone1_prime
from .zone_geometry_engine import build_zone_layout, calculate_zone_dimensions

logger = logging.getLogger(__name__)


class ZonePressureEngine:
    """
    Wind pressure zone calculator for rectangular low-rise buildings.
    Keeps an audit trail of the last calculation; use one instance per request.
    """

    def __init__(self, config: EngineConfig):
        self.config = config
        self.calculations: List[Dict[str, Any]] = []
        self.input_warnings: List[str] = []

    def _add_calc_step(self, description: str, calculation: str, reference: str = ""):
        """Add a calculation step to the audit trail"""
        self.calculations.append({
            "description": description,
            "calculation": calculation,
            "reference": reference
        })

    def calculate(self, request: ZonePressureRequest) -> ZoneCalculationResults:
        """
        Main calculation method for zone pressures.

        Raises:
            InvalidGeometryError: Missing or non-positive dimensions, unknown exposure.
            InvalidRequestError: No velocity pressure and no inputs to derive it, or a
                non-finite velocity pressure value.
        """
        self.calculations = []
        self.input_warnings = []

        geometry = analyze_building_geometry(
            request.building_length, request.building_width, request.building_height
        )
        exposure = ExposureCategory.parse(request.exposure_category)

        self._add_calc_step(
            "ZONE PRESSURE CALCULATION - ASCE 7-22",
            f"Building: {geometry.length:g}' × {geometry.width:g}' × {geometry.height:g}'\n"
            f"Aspect ratio = max(L/W, W/L) = {geometry.aspect_ratio:.3f}\n"
            f"Height ratio = h / min(L, W) = {geometry.height_ratio:.3f}\n"
            f"Classification: {geometry.classification.type.value}\n"
            f"Exposure: {exposure.value}",
            "ASCE 7-22 Section 26.7"
        )

        # Step 1: Velocity pressure at mean roof height
        kz_result = calculate_kz(geometry.height, exposure)
        qz = self._resolve_velocity_pressure(request, kz_result)

        # Step 2: Enclosure and internal pressure
        enclosure = self._resolve_enclosure(request)

        # Step 3: Zone 1' requirement
        default_area = self._resolve_default_area(request.effective_wind_area)
        analysis = analyze_zone1_prime(geometry, exposure, effective_wind_area=default_area)
        self._add_calc_step(
            "Zone 1' evaluation",
            "\n".join(
                f"{t.type}: {t.value:.3f} vs {t.threshold:g} -> "
                f"{'triggered' if t.triggered else 'not triggered'}"
                for t in analysis.triggers
            ) + f"\nRequired: {analysis.is_required} (increase {analysis.pressure_increase:g}%)",
            analysis.asce_reference
        )

        # Step 4: Zone dimensions and layout
        dimensions = calculate_zone_dimensions(geometry.length, geometry.width, geometry.height)
        self._add_calc_step(
            "Zone dimensions",
            f"a = max(3, min(0.1L, 0.1W, 3h)) = {dimensions.corner_dimension:.2f}'\n"
            f"Perimeter width = min(0.1L, 0.1W, 2h, 10) = {dimensions.perimeter_width:.2f}'",
            "ASCE 7-22 Figure 30.3-2A"
        )

        zone_areas = self._resolve_zone_areas(request)
        zones, coefficient_warnings = build_zone_layout(
            geometry,
            analysis,
            dimensions,
            request.calculation_method,
            self.config,
            effective_wind_area=default_area,
            zone_effective_areas=zone_areas,
        )

        # Step 5: Net pressures
        mode = self.config.net_pressure_mode
        zones = apply_net_pressures(zones, qz, enclosure, mode)
        for zone in zones:
            logger.debug(f"{zone.id}: GCp={zone.gcp:.3f}, p={zone.net_pressure:.2f} psf")

        self._add_calc_step(
            "Net design pressures",
            f"p = qh × (GCp - GCpi), mode = {mode.value}\n"
            + "\n".join(
                f"{zone.name}: GCp = {zone.gcp:.2f}, p = {zone.net_pressure:.1f} psf"
                for zone in zones
            ),
            "ASCE 7-22 Section 30.3.2"
        )

        vulnerability = assess_wind_vulnerability(geometry, exposure)

        results = aggregate_results(
            zones,
            geometry,
            analysis,
            dimensions,
            qz,
            enclosure,
            mode,
            kz_result=kz_result,
            vulnerability=vulnerability,
            coefficient_warnings=self.input_warnings + coefficient_warnings,
            calculation_steps=self.calculations,
            exposure=exposure,
            wind_speed=request.velocity_pressure_inputs.wind_speed if request.velocity_pressure_inputs else None,
        )

        logger.info(
            f"Zone pressures computed: {len(zones)} zones, max {results.max_pressure:.1f} psf "
            f"({results.controlling_zone})"
        )
        return results

    def _resolve_velocity_pressure(self, request: ZonePressureRequest, kz_result: KzResult) -> float:
        """qz from the request, either precomputed or from wind speed inputs"""
        if request.velocity_pressure is not None:
            qz = request.velocity_pressure
            if not math.isfinite(qz):
                raise InvalidRequestError(f"Velocity pressure must be a finite number, got {qz!r}")
            if qz < 0:
                message = tagged(
                    INVALID_VELOCITY_INPUT,
                    f"Velocity pressure must be non-negative, got {qz:g} psf - using 0 psf",
                )
                logger.warning(message)
                self.input_warnings.append(message)
                qz = 0.0
            self._add_calc_step(
                "Velocity pressure",
                f"qh = {qz:.2f} psf (supplied)",
                "ASCE 7-22 Equation 26.10-1"
            )
            return qz

        inputs = request.velocity_pressure_inputs
        if inputs is None:
            raise InvalidRequestError(
                "Either velocity_pressure or velocity_pressure_inputs is required"
            )

        qz = calculate_velocity_pressure(kz_result.kz, inputs)
        self.input_warnings.extend(velocity_pressure_warnings(inputs))
        self._add_calc_step(
            "Velocity pressure",
            f"{kz_result.formula}\n"
            f"qh = 0.00256 × Kz × Kzt × Kd × V²\n"
            f"qh = 0.00256 × {kz_result.kz:.3f} × {inputs.topographic_factor:.2f} × "
            f"{inputs.directionality_factor:.2f} × {inputs.wind_speed!s}² = {qz:.2f} psf",
            "ASCE 7-22 Equation 26.10-1"
        )
        return qz

    def _resolve_enclosure(self, request: ZonePressureRequest) -> EnclosureClassification:
        """Precomputed enclosure, or classify from the opening inventory"""
        if request.enclosure is not None:
            enclosure = request.enclosure
        else:
            enclosure = classify_enclosure(
                request.openings,
                request.building_length,
                request.building_width,
                request.building_height,
                windborne_debris_region=request.windborne_debris_region,
                apply_failure_scenario=self.config.apply_failure_scenario,
            )

        self._add_calc_step(
            "Internal pressure coefficient",
            f"Enclosure: {enclosure.type.value}\n"
            f"GCpi = +{enclosure.gcpi_positive:.2f} / {enclosure.gcpi_negative:.2f}",
            "ASCE 7-22 Table 26.13-1"
        )
        return enclosure

    def _resolve_default_area(self, area: float) -> float:
        if area is None or area <= 0:
            message = f"Invalid effective wind area {area!r}, using {DEFAULT_EFFECTIVE_WIND_AREA} sq ft"
            logger.warning(message)
            if message not in self.input_warnings:
                self.input_warnings.append(message)
            return DEFAULT_EFFECTIVE_WIND_AREA
        return area

    def _resolve_zone_areas(self, request: ZonePressureRequest) -> Dict[ZoneType, float]:
        return {
            zone_type: self._resolve_default_area(area)
            for zone_type, area in (request.zone_effective_areas or {}).items()
        }


def compute_zone_pressures(request: ZonePressureRequest, config: EngineConfig) -> ZoneCalculationResults:
    """Compute ASCE 7 pressure zones for one request."""
    return ZonePressureEngine(config).calculate(request)
