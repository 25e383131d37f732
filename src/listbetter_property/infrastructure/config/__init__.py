"""Infrastructure configuration module."""

from .app_config import ENV_PREFIX, Config

__all__ = ["Config", "ENV_PREFIX"]
