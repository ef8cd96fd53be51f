# cityfinder/config.py
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application settings loaded from env/.env via pydantic-settings."""
    # OpenWeatherMap
    openweather_base: str = Field(default="http://api.openweathermap.org/data/2.5")
    openweather_appid: str = Field(default="")
    openweather_timeout: float = Field(default=10.0)

    # Client runtime
    watch_interval: float = Field(default=0.05)
    start_url: str = Field(default="http://localhost:3000/")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Event log
    data_dir: str = Field(default="data")
    events_max_bytes: int = Field(default=2_000_000)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("port")
    @classmethod
    def _port_positive(cls, v: int) -> int:
        if v <= 0 or v > 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("watch_interval", "openweather_timeout")
    @classmethod
    def _seconds_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Intervals and timeouts must be positive")
        return v

settings = Settings()
