"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from .engine_schema import EngineConfig, FamiliesConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    engine: EngineConfig = Field(default_factory=lambda: EngineConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    families: FamiliesConfig = Field(default_factory=lambda: FamiliesConfig())

    @model_validator(mode="after")
    def ensure_families_enabled(self) -> "AppConfig":
        """At least one built-in family must be registered at startup."""
        if not self.families.enabled:
            raise ValueError("At least one family must be enabled")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """Validate configuration data and return an AppConfig."""
    return AppConfig.from_dict(data)
