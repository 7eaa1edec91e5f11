from windzone.ui.zone_details import build_zone_details_dataframe, build_trigger_dataframe, build_zone_summary
