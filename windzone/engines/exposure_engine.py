"""
Velocity Pressure Exposure Coefficient - ASCE 7-22 Section 26.10
Calculates Kz from height and exposure category, and the velocity pressure qz.
"""

import logging
import math
from typing import List, Union

from ..core.constants import (
    EXPOSURE_PARAMS,
    KZ_COEFFICIENT,
    SIMPLIFIED_HEIGHT_LIMIT,
    TYPICAL_HEIGHT_LIMIT,
    VELOCITY_PRESSURE_CONSTANT,
)
from ..core.data_models import ExposureCategory, KzResult, VelocityPressureInputs
from ..core.errors import (
    INVALID_VELOCITY_INPUT,
    InvalidGeometryError,
    InvalidRequestError,
    SIMPLIFIED_METHOD_EXCEEDED,
    tagged,
)

logger = logging.getLogger(__name__)


def calculate_kz(height: float, exposure: Union[ExposureCategory, str]) -> KzResult:
    """
    Calculate velocity pressure exposure coefficient Kz.
    Kz = 2.01 × (z / zg)^(2/α) for z ≥ z_min
    where zg and α are the terrain constants of the exposure category.

    Raises:
        InvalidGeometryError: If height is non-positive, not finite, or exposure unknown.
    """
    category = ExposureCategory.parse(exposure)
    if height is None or not math.isfinite(height) or height <= 0:
        raise InvalidGeometryError(f"Building height must be positive, got {height!r}")

    params = EXPOSURE_PARAMS[category.value]
    zg = params["zg"]
    alpha = params["alpha"]
    z_min = params["z_min"]

    warnings: List[str] = []
    height_used = height
    if height < z_min:
        height_used = z_min
        warnings.append(
            f"Height increased from {height:g}ft to minimum {z_min:g}ft "
            f"for Exposure {category.value}"
        )

    kz = KZ_COEFFICIENT * (height_used / zg) ** (2.0 / alpha)

    if height > SIMPLIFIED_HEIGHT_LIMIT:
        warnings.append(tagged(
            SIMPLIFIED_METHOD_EXCEEDED,
            f"Height {height:g}ft exceeds the {SIMPLIFIED_HEIGHT_LIMIT:g}ft low-rise limit - "
            f"specialized analysis may be warranted",
        ))
    if height > TYPICAL_HEIGHT_LIMIT:
        warnings.append(
            f"Height exceeds typical design range ({TYPICAL_HEIGHT_LIMIT:g}ft) - "
            f"verify calculation method"
        )

    return KzResult(
        kz=kz,
        height_used=height_used,
        formula=f"Kz = {KZ_COEFFICIENT} × ({height_used:g}/{zg:g})^(2/{alpha:g}) = {kz:.3f}",
        warnings=tuple(warnings),
    )


def velocity_pressure_warnings(inputs: VelocityPressureInputs) -> List[str]:
    """Warnings for velocity pressure inputs that force qz to zero."""
    warnings: List[str] = []
    if inputs.wind_speed is None or inputs.wind_speed <= 0:
        warnings.append(tagged(
            INVALID_VELOCITY_INPUT,
            f"Wind speed must be positive, got {inputs.wind_speed!r} - velocity pressure set to 0 psf",
        ))
    if inputs.topographic_factor <= 0 or inputs.directionality_factor <= 0:
        warnings.append(tagged(
            INVALID_VELOCITY_INPUT,
            f"Topographic and directionality factors must be positive "
            f"(Kzt={inputs.topographic_factor!r}, Kd={inputs.directionality_factor!r}) - "
            f"velocity pressure set to 0 psf",
        ))
    return warnings


def calculate_velocity_pressure(kz: float, inputs: VelocityPressureInputs) -> float:
    """
    Velocity pressure qz (psf) per ASCE 7-22 Eq. 26.10-1:
    qz = 0.00256 × Kz × Kzt × Kd × V²

    Non-positive wind speed or factors give qz = 0; see velocity_pressure_warnings.

    Raises:
        InvalidRequestError: If wind speed or a factor is not a finite number.
    """
    values = (inputs.wind_speed, inputs.topographic_factor, inputs.directionality_factor)
    if any(value is not None and not math.isfinite(value) for value in values):
        raise InvalidRequestError(
            f"Velocity pressure inputs must be finite, got V={inputs.wind_speed!r}, "
            f"Kzt={inputs.topographic_factor!r}, Kd={inputs.directionality_factor!r}"
        )
    if velocity_pressure_warnings(inputs):
        logger.warning(f"Invalid velocity pressure inputs {inputs} - qz clamped to 0")
        return 0.0

    qz = (
        VELOCITY_PRESSURE_CONSTANT
        * kz
        * inputs.topographic_factor
        * inputs.directionality_factor
        * inputs.wind_speed ** 2
    )
    logger.debug(
        f"qz = 0.00256 × {kz:.3f} × {inputs.topographic_factor} × "
        f"{inputs.directionality_factor} × {inputs.wind_speed}² = {qz:.2f} psf"
    )
    return qz
