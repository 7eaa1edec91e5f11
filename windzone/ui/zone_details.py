"""Helpers for rendering pressure zone result tables."""

from typing import Dict, Union

import pandas as pd

from windzone.core.data_models import ZoneCalculationResults


def build_zone_details_dataframe(results: ZoneCalculationResults) -> pd.DataFrame:
    """Build per-zone pressure table for read-only views."""
    if not results.zones:
        raise ValueError("Zone results are empty")

    return pd.DataFrame(
        {
            "Zone": [zone.name for zone in results.zones],
            "Type": [zone.type.value for zone in results.zones],
            "GCp": [zone.gcp for zone in results.zones],
            "Area (sq ft)": [zone.area for zone in results.zones],
            "Net Pressure (psf)": [zone.net_pressure for zone in results.zones],
            "Zone 1'": [zone.is_zone1_prime for zone in results.zones],
            "Reference": [zone.asce_reference for zone in results.zones],
        }
    )


def build_trigger_dataframe(results: ZoneCalculationResults) -> pd.DataFrame:
    """Build Zone 1' trigger table."""
    triggers = results.zone1_prime_analysis.triggers
    return pd.DataFrame(
        {
            "Trigger": [trigger.type for trigger in triggers],
            "Value": [trigger.value for trigger in triggers],
            "Threshold": [trigger.threshold for trigger in triggers],
            "Triggered": [trigger.triggered for trigger in triggers],
            "Impact": [trigger.impact for trigger in triggers],
        }
    )


def build_zone_summary(results: ZoneCalculationResults) -> Dict[str, Union[float, str, bool]]:
    """Build summary values displayed under the zone table."""
    summary: Dict[str, Union[float, str, bool]] = {
        "total_zones": float(len(results.zones)),
        "max_pressure": float(results.max_pressure),
        "controlling_zone": results.controlling_zone,
        "zone1_prime_required": results.zone1_prime_required,
        "zone1_prime_area": float(results.affected_area.zone1_prime),
        "total_area": float(results.affected_area.total),
        "velocity_pressure": float(results.velocity_pressure),
    }
    if results.pressure_bounds is not None:
        summary["pressure_lower_bound"] = float(results.pressure_bounds.lower)
        summary["pressure_upper_bound"] = float(results.pressure_bounds.upper)
    return summary
