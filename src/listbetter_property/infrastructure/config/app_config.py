"""Configuration management for the property lister."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ...domain.models import ListOptions

ENV_PREFIX = "LISTBETTER_"

_TRUE_VALUES = ("true", "1", "yes", "on")


def _env_flag(name: str, default: Optional[bool]) -> Optional[bool]:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class Config:
    """Configuration for the command line tool and its listing defaults."""

    verbose: bool = False
    log_dir: Optional[Path] = None
    include_inherited: bool = False
    include_non_enumerable: bool = False
    show_types: bool = True
    # None when not set: JSON listings carry values, display mode omits them
    show_values: Optional[bool] = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        log_dir_str = os.getenv(f"{ENV_PREFIX}LOG_DIR")
        defaults = ListOptions()

        return cls(
            verbose=_env_flag("VERBOSE", False),
            log_dir=Path(log_dir_str) if log_dir_str else None,
            include_inherited=_env_flag("INCLUDE_INHERITED", defaults.include_inherited),
            include_non_enumerable=_env_flag(
                "INCLUDE_NON_ENUMERABLE", defaults.include_non_enumerable
            ),
            show_types=_env_flag("SHOW_TYPES", defaults.show_types),
            show_values=_env_flag("SHOW_VALUES", defaults.show_values),
        )

    @classmethod
    def from_args(
        cls,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        include_inherited: Optional[bool] = None,
        include_non_enumerable: Optional[bool] = None,
        show_types: Optional[bool] = None,
        show_values: Optional[bool] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Arguments left as None keep the environment value.

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        overrides = {
            "verbose": verbose,
            "log_dir": log_dir,
            "include_inherited": include_inherited,
            "include_non_enumerable": include_non_enumerable,
            "show_types": show_types,
            "show_values": show_values,
        }
        for name, value in overrides.items():
            if value is not None:
                setattr(config, name, value)

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.log_dir is not None and self.log_dir.exists() and not self.log_dir.is_dir():
            raise ValueError(f"Log directory is not a directory: {self.log_dir}")

    def list_options(self) -> ListOptions:
        """Build listing options from the configured defaults."""
        return ListOptions(
            include_inherited=self.include_inherited,
            include_non_enumerable=self.include_non_enumerable,
            show_types=self.show_types,
            show_values=self.show_values,
        )
