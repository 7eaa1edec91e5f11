import pytest

from windzone.core.config import EngineConfig
from windzone.core.data_models import CalculationMethod, ZoneType
from windzone.engines.aspect_engine import analyze_building_geometry
from windzone.engines.zone1_prime_engine import analyze_zone1_prime
from windzone.engines.zone_geometry_engine import build_zone_layout, calculate_zone_dimensions

CC = CalculationMethod.COMPONENT_CLADDING


def _layout(length, width, height, config, exposure="C", **kwargs):
    geometry = analyze_building_geometry(length, width, height)
    analysis = analyze_zone1_prime(geometry, exposure)
    dimensions = calculate_zone_dimensions(length, width, height)
    return build_zone_layout(geometry, analysis, dimensions, CC, config, **kwargs)


class TestZoneDimensions:

    def test_elongated_warehouse(self) -> None:
        # corner = min(20, 5, 60, 20, 5) = 5; perimeter = min(20, 5, 40, 10) = 5
        dims = calculate_zone_dimensions(200.0, 50.0, 20.0)

        assert dims.corner_dimension == pytest.approx(5.0)
        assert dims.perimeter_width == pytest.approx(5.0)
        assert dims.warnings == ()

    def test_square_building(self) -> None:
        # corner = min(10, 10, 90, 10, 10) = 10; perimeter = min(10, 10, 60, 10) = 10
        dims = calculate_zone_dimensions(100.0, 100.0, 30.0)

        assert dims.corner_dimension == pytest.approx(10.0)
        assert dims.perimeter_width == pytest.approx(10.0)

    def test_corner_minimum_three_feet(self) -> None:
        dims = calculate_zone_dimensions(20.0, 20.0, 10.0)

        assert dims.corner_dimension == pytest.approx(3.0)
        assert dims.perimeter_width == pytest.approx(2.0)

    def test_perimeter_width_capped_at_ten_feet(self) -> None:
        dims = calculate_zone_dimensions(400.0, 300.0, 40.0)

        assert dims.perimeter_width == pytest.approx(10.0)

    def test_corner_limited_to_half_least_dimension(self) -> None:
        dims = calculate_zone_dimensions(5.0, 5.0, 10.0)

        assert dims.corner_dimension == pytest.approx(2.5)
        assert len(dims.warnings) == 1


class TestStandardLayout:

    def test_square_building_zones(self, typical_config) -> None:
        zones, warnings = _layout(100.0, 100.0, 30.0, typical_config, exposure="B")

        assert [z.id for z in zones] == [
            "corner-nw", "corner-ne", "corner-sw", "corner-se",
            "perimeter-north", "perimeter-south", "perimeter-west", "perimeter-east",
            "field-center",
        ]
        assert not any(z.is_zone1_prime for z in zones)
        field = zones[-1]
        assert field.type == ZoneType.FIELD
        assert field.area == pytest.approx(80.0 * 80.0)
        assert warnings == []

    def test_baseline_coefficients_at_default_area(self, typical_config) -> None:
        zones, _ = _layout(100.0, 100.0, 30.0, typical_config, exposure="B")
        by_type = {z.type: z.gcp for z in zones}

        assert by_type[ZoneType.CORNER] == pytest.approx(-2.5)
        assert by_type[ZoneType.PERIMETER] == pytest.approx(-1.5)
        assert by_type[ZoneType.FIELD] == pytest.approx(-1.0)

    def test_zones_within_footprint(self, typical_config) -> None:
        length, width = 120.0, 70.0
        zones, _ = _layout(length, width, 25.0, typical_config)

        for zone in zones:
            loc = zone.location
            assert zone.area > 0
            assert loc.x >= 0 and loc.y >= 0
            assert loc.x + loc.width <= length + 1e-9
            assert loc.y + loc.height <= width + 1e-9
            assert zone.area == pytest.approx(loc.width * loc.height)

    def test_net_pressure_left_unset(self, typical_config) -> None:
        zones, _ = _layout(100.0, 100.0, 30.0, typical_config, exposure="B")

        assert all(z.net_pressure == 0.0 for z in zones)

    def test_degenerate_strips_omitted(self, typical_config) -> None:
        # Corners of 2.5' fill each 5' edge entirely
        zones, _ = _layout(5.0, 5.0, 4.0, typical_config)

        assert not any(z.type == ZoneType.PERIMETER for z in zones)
        assert sum(1 for z in zones if z.id.startswith("corner")) == 4

    def test_configured_baseline_is_used(self) -> None:
        # Baseline ratios that themselves qualify for Zone 1' steepen standard zones
        config = EngineConfig(baseline_aspect_ratio=2.0, baseline_height_ratio=0.5)

        zones, _ = _layout(100.0, 100.0, 30.0, config, exposure="B")
        corner = next(z for z in zones if z.id == "corner-nw")

        assert corner.type == ZoneType.CORNER
        assert corner.gcp == pytest.approx(-2.8)

    def test_strip_reference_follows_method(self, typical_config) -> None:
        geometry = analyze_building_geometry(100.0, 100.0, 30.0)
        analysis = analyze_zone1_prime(geometry, "B")
        dimensions = calculate_zone_dimensions(100.0, 100.0, 30.0)

        zones, _ = build_zone_layout(
            geometry, analysis, dimensions, CalculationMethod.MAIN_FORCE, typical_config
        )

        assert {z.asce_reference for z in zones} == {"ASCE 7-22 Figure 26.5-2"}


class TestZone1PrimeLayout:

    def test_elongated_corners_are_prime(self, typical_config) -> None:
        zones, _ = _layout(200.0, 50.0, 20.0, typical_config)
        corners = [z for z in zones if z.id.startswith("corner")]

        assert len(corners) == 4
        assert all(z.type == ZoneType.CORNER_PRIME for z in corners)
        assert all(z.is_zone1_prime for z in corners)
        assert corners[0].name == "Northwest Corner (Zone 1')"
        assert corners[0].gcp == pytest.approx(-3.4)

    def test_single_enhanced_strip_along_long_side(self, typical_config) -> None:
        zones, _ = _layout(200.0, 50.0, 20.0, typical_config)
        prime_strips = [z for z in zones if z.type == ZoneType.PERIMETER_PRIME]

        assert len(prime_strips) == 1
        assert prime_strips[0].id == "perimeter-north-prime"
        assert prime_strips[0].area == pytest.approx(190.0 * 5.0)
        assert prime_strips[0].gcp == pytest.approx(-2.2)

    def test_enhanced_strip_follows_long_side_when_rotated(self, typical_config) -> None:
        zones, _ = _layout(50.0, 200.0, 20.0, typical_config)
        prime_strips = [z for z in zones if z.type == ZoneType.PERIMETER_PRIME]

        assert len(prime_strips) == 1
        assert prime_strips[0].id == "perimeter-west-prime"
        assert prime_strips[0].area == pytest.approx(190.0 * 5.0)

    def test_no_enhanced_strip_below_aspect_three(self, typical_config) -> None:
        zones, _ = _layout(125.0, 50.0, 20.0, typical_config)

        assert all(z.type == ZoneType.CORNER_PRIME for z in zones if z.id.startswith("corner"))
        assert not any(z.type == ZoneType.PERIMETER_PRIME for z in zones)

    def test_area_is_conserved(self, typical_config) -> None:
        # Corner dimension equals perimeter width, so zones tile the roof
        zones, _ = _layout(200.0, 50.0, 20.0, typical_config)

        assert sum(z.area for z in zones) == pytest.approx(200.0 * 50.0)

    def test_per_zone_effective_area(self, typical_config) -> None:
        zones, _ = _layout(
            200.0, 50.0, 20.0, typical_config,
            zone_effective_areas={ZoneType.CORNER: 100.0},
        )
        corner = next(z for z in zones if z.id == "corner-nw")
        field = next(z for z in zones if z.type == ZoneType.FIELD)

        assert corner.gcp == pytest.approx(-3.0)
        assert field.gcp == pytest.approx(-1.0)

    def test_out_of_range_area_reports_warning(self, typical_config) -> None:
        zones, warnings = _layout(200.0, 50.0, 20.0, typical_config, effective_wind_area=1000.0)

        assert warnings
        assert all(z.coefficient_interpolated for z in zones)
