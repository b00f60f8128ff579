"""Configuration models for qmkwrap."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CODE_HEADER = Path("users") / "qmkwrap" / "qmkwrap_codes.h"


class PipelineConfig(BaseModel):
    """Directories and header settings used by the compile pipeline."""

    qmk_dir: Path | None = Field(
        default=None, description="Root directory of the QMK firmware checkout"
    )
    output_dir: Path | None = Field(
        default=None, description="Directory that receives compiled artifacts"
    )
    code_header: Path = Field(
        default=DEFAULT_CODE_HEADER,
        description="Generated header path, relative to qmk_dir",
    )
    macro_prefix: str = Field(
        default="QMKWRAP",
        description="Prefix of the VERSION, CODE_1 and CODE_2 macros",
    )

    @field_validator("qmk_dir", "output_dir", mode="before")
    @classmethod
    def empty_path_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("qmk_dir", "output_dir")
    @classmethod
    def expand_user(cls, v: Path | None) -> Path | None:
        return v.expanduser() if v is not None else None

    @field_validator("macro_prefix")
    @classmethod
    def validate_macro_prefix(cls, v: str) -> str:
        if not v or not v.replace("_", "").isalnum():
            raise ValueError("macro_prefix must be a non-empty C identifier")
        return v

    def is_complete(self) -> bool:
        """True when both directories have been set."""
        return bool(self.qmk_dir) and bool(self.output_dir)

    @property
    def header_path(self) -> Path:
        """Absolute location of the generated header."""
        if self.qmk_dir is None:
            raise ValueError("qmk_dir is not set")
        return self.qmk_dir / self.code_header


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (``QMKWRAP_PIPELINE__QMK_DIR`` etc.)
    2. Constructor arguments (file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="QMKWRAP_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file configuration."""
        return (env_settings, init_settings)

    log_level: str = "WARNING"
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper_v = v.upper()
        if upper_v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return upper_v


class CipherKeys(BaseSettings):
    """Secret material used to encode the codes embedded in the header.

    Read from ``QMKWRAP_KEY1`` and ``QMKWRAP_KEY2`` only. Never written to disk.
    """

    model_config = SettingsConfigDict(
        env_prefix="QMKWRAP_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        return (init_settings, env_settings)

    key1: SecretStr = SecretStr("")
    key2: SecretStr = SecretStr("")


__all__ = ["CipherKeys", "DEFAULT_CODE_HEADER", "PipelineConfig", "UserConfigData"]
