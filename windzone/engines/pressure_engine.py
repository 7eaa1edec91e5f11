"""
Net Design Pressure - ASCE 7-22 Section 30.3.2
p = qh × [(GCp) - (GCpi)]
"""

from dataclasses import replace
from typing import List, Tuple

from ..core.data_models import EnclosureClassification, NetPressureMode, PressureZone


def internal_pressure_cases(
    qz: float,
    gcp: float,
    gcpi_positive: float,
    gcpi_negative: float,
) -> Tuple[float, float]:
    """Net pressure magnitude (psf) for the positive and negative GCpi cases"""
    external = qz * gcp
    return abs(external - qz * gcpi_positive), abs(external - qz * gcpi_negative)


def calculate_net_pressure(
    qz: float,
    gcp: float,
    gcpi_positive: float,
    gcpi_negative: float,
    mode: NetPressureMode = NetPressureMode.ENVELOPE,
) -> float:
    """
    Net pressure magnitude (psf), always >= 0.

    POSITIVE_INTERNAL_ONLY: |qz × GCp - qz × GCpi+|
    ENVELOPE:               larger of the GCpi+ and GCpi- cases
    """
    positive_case, negative_case = internal_pressure_cases(qz, gcp, gcpi_positive, gcpi_negative)
    if mode == NetPressureMode.POSITIVE_INTERNAL_ONLY:
        return positive_case
    return max(positive_case, negative_case)


def apply_net_pressures(
    zones: List[PressureZone],
    qz: float,
    enclosure: EnclosureClassification,
    mode: NetPressureMode,
) -> List[PressureZone]:
    """Return new zones with net_pressure filled in"""
    return [
        replace(
            zone,
            net_pressure=calculate_net_pressure(
                qz, zone.gcp, enclosure.gcpi_positive, enclosure.gcpi_negative, mode
            ),
        )
        for zone in zones
    ]
