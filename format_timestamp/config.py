"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Command line settings loaded from environment variables."""

    # Preset name (see presets.PRESETS) or a pattern like "{year4}-{month2}"
    default_template: str = "iso8601"

    # Convert to the device's local timezone before formatting
    local: bool = False

    # Logging Configuration
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="FORMAT_TIMESTAMP_",
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
