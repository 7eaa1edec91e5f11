"""
Enclosure classification tests.

Reference building: 100' × 50' × 20'
    gross wall area   = 2 × (100 + 50) × 20 = 6000 sq ft
    windward wall A_g = 100 × 20 = 2000 sq ft
"""

import pytest

from windzone.core.data_models import (
    BuildingOpening,
    EnclosureType,
    FacadeLocation,
    GlazingType,
    OpeningType,
)
from windzone.core.errors import LOW_CONFIDENCE_CLASSIFICATION
from windzone.engines.enclosure_engine import classify_enclosure, internal_pressure_for


def _classify(openings, **kwargs):
    return classify_enclosure(openings, 100.0, 50.0, 20.0, **kwargs)


class TestInternalPressurePairs:

    @pytest.mark.parametrize("enclosure_type, expected", [
        (EnclosureType.ENCLOSED, (0.18, -0.18)),
        (EnclosureType.PARTIALLY_ENCLOSED, (0.55, -0.55)),
        (EnclosureType.OPEN, (0.0, 0.0)),
    ])
    def test_standard_pairs(self, enclosure_type, expected) -> None:
        assert internal_pressure_for(enclosure_type) == pytest.approx(expected)


class TestClassification:

    def test_missing_inventory_defaults_to_enclosed(self) -> None:
        result = _classify(None)

        assert result.type == EnclosureType.ENCLOSED
        assert result.gcpi_positive == pytest.approx(0.18)
        assert result.warnings[0].startswith(LOW_CONFIDENCE_CLASSIFICATION)

    def test_empty_inventory_defaults_to_enclosed(self) -> None:
        result = _classify([])

        assert result.type == EnclosureType.ENCLOSED
        assert result.warnings[0].startswith(LOW_CONFIDENCE_CLASSIFICATION)

    def test_balanced_openings_are_enclosed(self) -> None:
        openings = [
            BuildingOpening(20.0, FacadeLocation.WINDWARD, OpeningType.DOOR),
            BuildingOpening(20.0, FacadeLocation.LEEWARD, OpeningType.DOOR),
            BuildingOpening(20.0, FacadeLocation.SIDE, OpeningType.WINDOW),
        ]

        result = _classify(openings)

        assert result.type == EnclosureType.ENCLOSED
        assert result.total_opening_area == pytest.approx(60.0)
        assert result.windward_opening_area == pytest.approx(20.0)
        assert result.opening_ratio == pytest.approx(60.0 / 6000.0)
        assert not result.has_dominant_opening

    def test_dominant_windward_opening_is_partially_enclosed(self) -> None:
        # A_o = 100 > 1.1 × 10 and > min(4, 0.01 × 2000); A_oi / A_gi = 10 / 4000
        openings = [
            BuildingOpening(100.0, FacadeLocation.WINDWARD, OpeningType.GARAGE),
            BuildingOpening(10.0, FacadeLocation.LEEWARD, OpeningType.DOOR),
        ]

        result = _classify(openings)

        assert result.type == EnclosureType.PARTIALLY_ENCLOSED
        assert result.has_dominant_opening
        assert result.gcpi_positive == pytest.approx(0.55)
        assert result.gcpi_negative == pytest.approx(-0.55)

    def test_mostly_open_walls_are_open(self) -> None:
        openings = [
            BuildingOpening(2000.0, FacadeLocation.WINDWARD),
            BuildingOpening(2000.0, FacadeLocation.LEEWARD),
            BuildingOpening(1000.0, FacadeLocation.SIDE),
        ]

        result = _classify(openings)

        assert result.type == EnclosureType.OPEN
        assert result.gcpi_positive == 0.0
        assert result.gcpi_negative == 0.0

    def test_windward_area_exceeding_wall_defaults_to_enclosed(self) -> None:
        result = _classify([BuildingOpening(3000.0, FacadeLocation.WINDWARD)])

        assert result.type == EnclosureType.ENCLOSED
        assert result.warnings[0].startswith(LOW_CONFIDENCE_CLASSIFICATION)

    def test_negative_area_defaults_to_enclosed(self) -> None:
        result = _classify([BuildingOpening(-5.0, FacadeLocation.WINDWARD)])

        assert result.type == EnclosureType.ENCLOSED
        assert result.warnings[0].startswith(LOW_CONFIDENCE_CLASSIFICATION)

    def test_large_opening_warning(self) -> None:
        openings = [
            BuildingOpening(250.0, FacadeLocation.WINDWARD, OpeningType.GARAGE),
            BuildingOpening(250.0, FacadeLocation.LEEWARD, OpeningType.GARAGE),
        ]

        result = _classify(openings)

        assert any(w.startswith("Large opening:") for w in result.warnings)


class TestFailureScenario:

    @staticmethod
    def _glazed_openings():
        return [
            BuildingOpening(30.0, FacadeLocation.WINDWARD, OpeningType.WINDOW,
                            GlazingType.NON_IMPACT_RATED, can_fail=True),
            BuildingOpening(30.0, FacadeLocation.LEEWARD, OpeningType.WINDOW),
        ]

    def test_flag_set_without_changing_gcpi(self) -> None:
        result = _classify(self._glazed_openings(), windborne_debris_region=True)

        assert result.failure_scenario_considered
        assert result.type == EnclosureType.ENCLOSED
        assert result.gcpi_positive == pytest.approx(0.18)
        assert any(w.startswith("Failure scenario:") for w in result.warnings)

    def test_applied_failure_scenario_uses_partially_enclosed(self) -> None:
        result = _classify(
            self._glazed_openings(),
            windborne_debris_region=True,
            apply_failure_scenario=True,
        )

        assert result.type == EnclosureType.PARTIALLY_ENCLOSED
        assert result.gcpi_positive == pytest.approx(0.55)

    def test_no_flag_outside_debris_region(self) -> None:
        result = _classify(self._glazed_openings(), apply_failure_scenario=True)

        assert not result.failure_scenario_considered
        assert result.type == EnclosureType.ENCLOSED

    def test_impact_rated_glazing_not_flagged(self) -> None:
        openings = [
            BuildingOpening(30.0, FacadeLocation.WINDWARD, OpeningType.WINDOW,
                            GlazingType.IMPACT_RATED, can_fail=True),
        ]

        result = _classify(openings, windborne_debris_region=True)

        assert not result.failure_scenario_considered
