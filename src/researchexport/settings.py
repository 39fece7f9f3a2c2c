"""
Configuration module for researchexport paths, transport and environment overrides.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://www.researchcatalogue.net/"


class Settings(BaseSettings):
    """
    Application settings using Pydantic for validation
    and environment variable support.
    """

    # Project root directory
    root_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent.parent
    )

    # Where the file sink writes exports
    output_dir: Optional[Path] = Field(default=None, validate_default=True)

    # Transport settings
    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Base URL for relative request targets"
    )

    request_timeout: int = Field(default=300, description="Request timeout in seconds")

    max_workers: Optional[int] = Field(
        default=None,
        description="Maximum number of concurrent requests (None = one per target)",
    )

    check_status: bool = Field(
        default=True, description="Treat non-2xx responses as transport failures"
    )

    # Output settings
    default_sink: str = Field(default="console", description="Default output sink")

    json_indent: Optional[int] = Field(
        default=None, description="Indentation for serialized output"
    )

    # General settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = {
        "env_prefix": "RESEARCHEXPORT_",
        "case_sensitive": False,
    }

    @field_validator("output_dir")
    @classmethod
    def set_output_dir(cls, v, info):
        values = info.data if hasattr(info, "data") else {}
        return (
            v
            or values.get("root_dir", Path(__file__).resolve().parent.parent.parent)
            / "exports"
        )

    @field_validator("max_workers")
    @classmethod
    def check_max_workers(cls, v):
        if v is not None and v < 1:
            raise ValueError("max_workers must be a positive integer")
        return v

    def create_directories(self) -> None:
        """Create the output directory if it doesn't exist."""
        if self.output_dir:
            self.output_dir.mkdir(parents=True, exist_ok=True)


settings = Settings()
