"""
Engine Configuration Module for windzone.

Baseline coefficient ratios are explicit configuration: the engine never
falls back to a built-in "typical building" on its own.

Usage:
    config = EngineConfig.from_env()
    results = compute_zone_pressures(request, config)
"""

from dataclasses import dataclass
from typing import Optional
import os
import logging

from dotenv import load_dotenv

from .data_models import NetPressureMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Wind zone engine configuration.

    Attributes:
        baseline_aspect_ratio: Aspect ratio used for standard (non Zone 1')
            coefficient lookups
        baseline_height_ratio: Height ratio used for standard coefficient lookups
        net_pressure_mode: Internal pressure combination (default: envelope of
            both GCpi signs)
        apply_failure_scenario: Use partially enclosed GCpi when a glazing
            failure scenario is flagged (default: False)
    """

    baseline_aspect_ratio: float
    baseline_height_ratio: float
    net_pressure_mode: NetPressureMode = NetPressureMode.ENVELOPE
    apply_failure_scenario: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.baseline_aspect_ratio < 1.0:
            raise ValueError("Baseline aspect ratio must be at least 1.0")

        if self.baseline_height_ratio <= 0:
            raise ValueError("Baseline height ratio must be positive")

        if not isinstance(self.net_pressure_mode, NetPressureMode):
            raise ValueError(f"Invalid net pressure mode: {self.net_pressure_mode!r}")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "EngineConfig":
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to .env file

        Returns:
            EngineConfig instance with loaded configuration

        Raises:
            ValueError: If required environment variables are missing or invalid
            FileNotFoundError: If env_file is specified but doesn't exist

        Environment Variables:
            WINDZONE_BASELINE_ASPECT_RATIO: Baseline aspect ratio (required)
            WINDZONE_BASELINE_HEIGHT_RATIO: Baseline height ratio (required)
            WINDZONE_NET_PRESSURE_MODE: envelope or positive_internal_only
            WINDZONE_APPLY_FAILURE_SCENARIO: Apply glazing failure GCpi (true/false)
        """
        if env_file and not load_dotenv(env_file):
            raise FileNotFoundError(f".env file not found: {env_file}")

        aspect_str = os.getenv("WINDZONE_BASELINE_ASPECT_RATIO")
        height_str = os.getenv("WINDZONE_BASELINE_HEIGHT_RATIO")
        if not aspect_str or not height_str:
            raise ValueError(
                "Missing baseline ratios: WINDZONE_BASELINE_ASPECT_RATIO and "
                "WINDZONE_BASELINE_HEIGHT_RATIO environment variables are required"
            )

        mode_str = os.getenv("WINDZONE_NET_PRESSURE_MODE", "envelope").lower()
        try:
            mode = NetPressureMode(mode_str)
        except ValueError:
            raise ValueError(
                f"Invalid WINDZONE_NET_PRESSURE_MODE: {mode_str}. "
                f"Must be one of: envelope, positive_internal_only"
            )

        apply_failure = os.getenv("WINDZONE_APPLY_FAILURE_SCENARIO", "false").lower() == "true"

        config = cls(
            baseline_aspect_ratio=float(aspect_str),
            baseline_height_ratio=float(height_str),
            net_pressure_mode=mode,
            apply_failure_scenario=apply_failure,
        )
        logger.info(
            f"Loaded engine config (baseline AR={config.baseline_aspect_ratio}, "
            f"h/D={config.baseline_height_ratio}, mode={config.net_pressure_mode.value})"
        )
        return config


# Typical compact low-rise building, for callers that want the customary baseline
TYPICAL_BUILDING_CONFIG = EngineConfig(
    baseline_aspect_ratio=1.0,
    baseline_height_ratio=0.5,
)
