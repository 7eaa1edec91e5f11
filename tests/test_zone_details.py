import pytest

from windzone import compute_zone_pressures
from windzone.ui.zone_details import (
    build_trigger_dataframe,
    build_zone_details_dataframe,
    build_zone_summary,
)


class TestZoneDetailsTables:

    def test_zone_dataframe_rows(self, elongated_request, typical_config) -> None:
        results = compute_zone_pressures(elongated_request, typical_config)

        df = build_zone_details_dataframe(results)

        assert len(df) == len(results.zones)
        assert list(df.columns) == [
            "Zone", "Type", "GCp", "Area (sq ft)", "Net Pressure (psf)", "Zone 1'", "Reference",
        ]
        assert df["Net Pressure (psf)"].max() == pytest.approx(results.max_pressure)
        assert df["Zone 1'"].sum() == 5

    def test_trigger_dataframe(self, elongated_request, typical_config) -> None:
        results = compute_zone_pressures(elongated_request, typical_config)

        df = build_trigger_dataframe(results)

        assert list(df["Trigger"]) == ["aspect_ratio", "height_ratio"]
        assert list(df["Triggered"]) == [True, False]

    def test_summary_values(self, square_request, typical_config) -> None:
        results = compute_zone_pressures(square_request, typical_config)

        summary = build_zone_summary(results)

        assert summary["total_zones"] == 9.0
        assert summary["zone1_prime_required"] is False
        assert summary["total_area"] == pytest.approx(10000.0)
        assert summary["pressure_upper_bound"] == pytest.approx(results.max_pressure)

    def test_empty_results_raise(self, square_request, typical_config) -> None:
        results = compute_zone_pressures(square_request, typical_config)
        results.zones = []

        with pytest.raises(ValueError):
            build_zone_details_dataframe(results)
