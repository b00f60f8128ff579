"""Configuration package for qmkwrap."""

from .models import CipherKeys, PipelineConfig, UserConfigData
from .user_config import UserConfig, create_user_config


__all__ = [
    "CipherKeys",
    "PipelineConfig",
    "UserConfig",
    "UserConfigData",
    "create_user_config",
]
