"""
Configuration management using Pydantic Settings
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from project root
# config.py is at: optionkit/core/config.py
_current_file = Path(__file__).resolve()
_package_dir = _current_file.parent.parent
_project_root = _package_dir.parent
ENV_FILE = _project_root / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE)


class Settings(BaseSettings):
    """Engine settings"""

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level for the optionkit logger")
    log_format: str = Field(
        default="text",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )
    log_module_levels: Optional[str] = Field(
        default=None,
        description='Module-specific log levels (JSON string, e.g., {"optionkit.support": "DEBUG"})'
    )

    # Registration defaults
    default_priority: int = Field(default=99, description="Hook priority used when a schema sets none")
    default_strict: int = Field(default=0, ge=0, le=1, description="Strictness: 0 coercive, 1 strict")
    option_prefix: str = Field(default="", description="Prefix applied to every registered option name")
    network_id: int = Field(default=1, ge=1, description="Network scope id used by the network store")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format"""
        normalized = v.strip().lower()
        if normalized not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}")
        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name"""
        normalized = v.strip().upper()
        if normalized not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return normalized

    @property
    def module_levels(self) -> Dict[str, str]:
        """Parse module-specific log levels from the JSON string"""
        if not self.log_module_levels:
            return {}
        try:
            levels = json.loads(self.log_module_levels)
        except (json.JSONDecodeError, TypeError):
            return {}
        if not isinstance(levels, dict):
            return {}
        return {str(module): str(level) for module, level in levels.items()}

    model_config = SettingsConfigDict(
        env_prefix="OPTIONKIT_",
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
