"""Configuration management for svg2stl."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SVG2STL_",
        extra="ignore",
    )

    # Renderer
    openscad_path: Optional[str] = Field(
        default=None,
        description="OpenSCAD executable (looked up on PATH when not set)",
    )
    render_timeout: float = Field(default=300.0, gt=0, description="Seconds to wait for OpenSCAD")

    # Conversion
    dpi: int = Field(default=96, ge=1, description="DPI used when scaling pixel units to millimeters")
    curve_steps: int = Field(
        default=10,
        ge=1,
        description="Line segments generated per curve. Higher = smoother curves",
    )

    log_level: str = Field(default="INFO", description="Logging level")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Settings) -> None:
    """Override global settings."""
    global _settings
    _settings = settings
