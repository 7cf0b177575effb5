"""Wage Calc SDK - Core functionality for wage projections."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_schedules_path,
    ConfigNotFoundError,
)

from .schemas import (
    RaiseEvent,
    Schedule,
    ProjectionConfig,
    ProjectionInputs,
    MAX_PROJECTION_YEARS,
    WageDataPoint,
    CalculationStats,
    CalculationResult,
)

from .schedules import (
    START_DATE,
    ALLIANCE_SCHEDULE,
    KP_SCHEDULE,
    POST_CONTRACT_RAISE,
    DEFAULT_CONFIG,
    ScheduleConfigError,
    load_projection_config,
    load_schedules_file,
    parse_projection_config,
    write_default_schedules,
)

from .projection import (
    MonthlySample,
    calculate_wage_impact,
    simulate_months,
    loss_at_year,
    hours_per_month,
)

from .formatting import (
    format_currency,
    format_rate,
    round_display,
    to_fixed,
)

from .insights import (
    get_ai_insights,
    build_insights_prompt,
    FALLBACK_MESSAGE,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "get_schedules_path",
    "ConfigNotFoundError",
    # Schemas
    "RaiseEvent",
    "Schedule",
    "ProjectionConfig",
    "ProjectionInputs",
    "MAX_PROJECTION_YEARS",
    "WageDataPoint",
    "CalculationStats",
    "CalculationResult",
    # Schedules
    "START_DATE",
    "ALLIANCE_SCHEDULE",
    "KP_SCHEDULE",
    "POST_CONTRACT_RAISE",
    "DEFAULT_CONFIG",
    "ScheduleConfigError",
    "load_projection_config",
    "load_schedules_file",
    "parse_projection_config",
    "write_default_schedules",
    # Projection engine
    "MonthlySample",
    "calculate_wage_impact",
    "simulate_months",
    "loss_at_year",
    "hours_per_month",
    # Formatting
    "format_currency",
    "format_rate",
    "round_display",
    "to_fixed",
    # Insights
    "get_ai_insights",
    "build_insights_prompt",
    "FALLBACK_MESSAGE",
]
