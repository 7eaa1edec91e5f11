import pytest

from windzone.core.data_models import ExposureCategory
from windzone.engines.aspect_engine import analyze_building_geometry
from windzone.engines.zone1_prime_engine import (
    analyze_zone1_prime,
    calculate_pressure_increase,
    detection_confidence,
    qualifies_for_zone1_prime,
)


def _analyze(length, width, height, exposure="B"):
    return analyze_zone1_prime(analyze_building_geometry(length, width, height), exposure)


def _trigger(analysis, trigger_type):
    return next(t for t in analysis.triggers if t.type == trigger_type)


class TestTriggers:

    def test_aspect_ratio_boundary_inclusive(self) -> None:
        analysis = _analyze(100.0, 50.0, 10.0)

        assert analysis.aspect_ratio == 2.0
        assert _trigger(analysis, "aspect_ratio").triggered
        assert analysis.is_required

    def test_aspect_ratio_just_below_boundary(self) -> None:
        analysis = _analyze(99.99995, 50.0, 10.0)

        assert analysis.aspect_ratio == pytest.approx(1.999999)
        assert not _trigger(analysis, "aspect_ratio").triggered
        assert not analysis.is_required

    def test_height_ratio_boundary_inclusive(self) -> None:
        analysis = _analyze(50.0, 50.0, 50.0)

        assert analysis.height_ratio == 1.0
        assert _trigger(analysis, "height_ratio").triggered
        assert not _trigger(analysis, "aspect_ratio").triggered
        assert analysis.is_required

    @pytest.mark.parametrize("height", [10.0, 40.0, 90.0, 250.0])
    def test_square_footprint_never_fires_aspect_trigger(self, height) -> None:
        analysis = _analyze(80.0, 80.0, height)

        assert not _trigger(analysis, "aspect_ratio").triggered

    @pytest.mark.parametrize("length, width, height", [
        (100.0, 100.0, 30.0),
        (100.0, 50.0, 10.0),
        (40.0, 40.0, 60.0),
        (300.0, 60.0, 80.0),
    ])
    def test_required_iff_any_trigger(self, length, width, height) -> None:
        analysis = _analyze(length, width, height)

        assert analysis.is_required == any(t.triggered for t in analysis.triggers)

    def test_not_required_has_zero_increase(self) -> None:
        analysis = _analyze(100.0, 100.0, 30.0)

        assert not analysis.is_required
        assert analysis.pressure_increase == 0.0
        assert "not required" in analysis.explanation

    def test_explanation_references_code(self) -> None:
        analysis = _analyze(250.0, 100.0, 20.0)

        assert "Figure 26.11-1A" in analysis.explanation
        assert "2.5 times longer than wide" in analysis.explanation


class TestPressureIncrease:

    def test_aspect_governed(self) -> None:
        # 20 + 10 × (2.5 - 2.0) = 25
        assert calculate_pressure_increase(2.5, 0.2, ExposureCategory.B) == pytest.approx(25.0)

    def test_height_governed(self) -> None:
        # 15 + 10 × (1.5 - 1.0) = 20
        assert calculate_pressure_increase(1.0, 1.5, ExposureCategory.B) == pytest.approx(20.0)

    def test_larger_of_both_governs(self) -> None:
        # aspect: 20 + 10 × 0.2 = 22; height: 15 + 10 × 1.0 = 25
        assert calculate_pressure_increase(2.2, 2.0, ExposureCategory.B) == pytest.approx(25.0)

    def test_open_terrain_bonus(self) -> None:
        assert calculate_pressure_increase(2.0, 0.2, ExposureCategory.C) == pytest.approx(25.0)
        assert calculate_pressure_increase(2.0, 0.2, ExposureCategory.D) == pytest.approx(25.0)

    def test_capped_at_forty_percent(self) -> None:
        assert calculate_pressure_increase(4.0, 0.4, ExposureCategory.C) == pytest.approx(40.0)
        assert calculate_pressure_increase(10.0, 5.0, ExposureCategory.B) == pytest.approx(40.0)

    def test_monotonic_in_aspect_ratio(self) -> None:
        values = [calculate_pressure_increase(ar, 0.2, ExposureCategory.B) for ar in (2.0, 2.5, 3.0, 3.5)]

        assert values == sorted(values)

    def test_qualification(self) -> None:
        assert qualifies_for_zone1_prime(2.0, 0.1)
        assert qualifies_for_zone1_prime(1.0, 1.0)
        assert not qualifies_for_zone1_prime(1.0, 0.5)


class TestWarnings:

    def test_high_increase_needs_review(self) -> None:
        analysis = _analyze(200.0, 50.0, 20.0, "C")

        assert analysis.pressure_increase == pytest.approx(40.0)
        assert any("professional engineering review" in w for w in analysis.warnings)
        assert any("wind tunnel" in w for w in analysis.warnings)

    def test_analysis_records_are_immutable_sequences(self) -> None:
        analysis = _analyze(200.0, 50.0, 20.0, "C")

        assert isinstance(analysis.triggers, tuple)
        assert isinstance(analysis.warnings, tuple)


class TestConfidence:

    def test_near_threshold_building(self) -> None:
        assert _analyze(200.0, 50.0, 20.0, "C").confidence == 95.0

    def test_building_clear_of_both_triggers(self) -> None:
        assert _analyze(100.0, 100.0, 30.0).confidence == 85.0

    def test_large_effective_area_lowers_confidence(self) -> None:
        geometry = analyze_building_geometry(200.0, 50.0, 20.0)

        analysis = analyze_zone1_prime(geometry, "C", effective_wind_area=200.0)

        assert analysis.confidence == 90.0

    @pytest.mark.parametrize("aspect_ratio, height_ratio, area, expected", [
        (1.0, 0.5, 10.0, 85.0),
        (1.8, 0.5, 10.0, 95.0),
        (1.0, 0.8, 10.0, 95.0),
        (1.0, 0.5, 100.0, 85.0),
        (1.0, 0.5, 150.0, 80.0),
    ])
    def test_thresholds(self, aspect_ratio, height_ratio, area, expected) -> None:
        assert detection_confidence(aspect_ratio, height_ratio, area) == expected
