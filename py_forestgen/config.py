"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Generation Configuration
    patch_attempts_per_patch: int = Field(
        default=100, gt=0, description="Patch center draws allowed per requested patch"
    )
    max_grid_width: int = Field(default=512, description="Max forest width accepted by the API")
    max_grid_height: int = Field(default=512, description="Max forest height accepted by the API")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
