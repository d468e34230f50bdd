from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="FILTERKIT_", env_file=".env")

    # Default collapse policy for filters and Filterable types.
    # When True, selecting every value resets the active set to empty.
    dismiss_values_when_all_are_selected: bool = True

    # Default for the strict flag of raw map conversions.
    # When False, unrecognized keys and non-equatable values are dropped.
    strict_raw_conversion: bool = False

    # Record FilterApplyMetrics for every filtered() call
    record_apply_metrics: bool = True

    # Most recent FilterApplyMetrics kept; older entries are discarded
    apply_metrics_history_size: int = 1000


settings = Settings()


# =============================================================================
# DISPLAY CONSTANTS
# =============================================================================

# Summary label used when a filter accepts every value
ALL_VALUES_LABEL = "All"
