"""
Configuration models for httpfacade.

Pydantic models validating the optional TOML configuration file, plus the
settings class that reads environment variable overrides.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES, DEFAULT_TIMEOUT_SECONDS


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class HttpSettingsConfig(BaseModel):
    """Client settings applied to the global configuration store."""

    timeout: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        description="Request timeout in seconds; zero or negative disables it",
    )
    proxy: Optional[str] = Field(None, description="Proxy URL used for every request")

    @field_validator("proxy")
    @classmethod
    def validate_proxy(cls, v: Optional[str]) -> Optional[str]:
        if v is None or len(v.strip()) == 0:
            return None
        if "://" not in v:
            raise ValueError("proxy must be a URL such as http://host:port")
        return v.strip()


class LoggingSettingsConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("console", description="Log format: console, json")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(DEFAULT_LOG_FILE_SIZE_BYTES, ge=1024, description="Maximum log file size in bytes")
    backup_count: int = Field(DEFAULT_LOG_BACKUP_COUNT, ge=1, le=20, description="Rotated log files to keep")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json"]:
            raise ValueError("format must be one of: console, json")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(f"output must contain only: {', '.join(sorted(valid_outputs))}")
        return v


class FacadeConfig(BaseModel):
    """Root httpfacade configuration model."""

    http: HttpSettingsConfig = Field(default_factory=HttpSettingsConfig)
    logging: LoggingSettingsConfig = Field(default_factory=LoggingSettingsConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class FacadeSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    httpfacade_timeout: Optional[float] = Field(None, alias="HTTPFACADE_TIMEOUT")
    httpfacade_proxy: Optional[str] = Field(None, alias="HTTPFACADE_PROXY")
    httpfacade_log_level: Optional[str] = Field(None, alias="HTTPFACADE_LOG_LEVEL")
    httpfacade_log_format: Optional[str] = Field(None, alias="HTTPFACADE_LOG_FORMAT")
    httpfacade_log_file: Optional[str] = Field(None, alias="HTTPFACADE_LOG_FILE")

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")
