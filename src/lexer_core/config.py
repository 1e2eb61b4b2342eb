"""
Configuration for Lexer Core.

All settings come from LEXER_* environment variables.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from lexer_core.core.exceptions import ConfigurationError

# Devnet deployer identity
DEFAULT_ADMINISTRATOR = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LexerSettings(BaseModel):
    """Runtime settings for the registry and its hosts."""

    administrator: str = Field(default=DEFAULT_ADMINISTRATOR, min_length=1)
    state_dir: Path = Path("var/registry")
    audit_dir: Path = Path("var/audit")
    persist: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LexerSettings":
        """
        Build settings from the environment.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        administrator = os.getenv("LEXER_ADMINISTRATOR", DEFAULT_ADMINISTRATOR).strip()
        if not administrator:
            raise ConfigurationError(
                "Administrator identity cannot be empty",
                env_var="LEXER_ADMINISTRATOR",
            )

        log_level = os.getenv("LEXER_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {log_level}",
                env_var="LEXER_LOG_LEVEL",
                details={"allowed": sorted(_LOG_LEVELS)},
            )

        return cls(
            administrator=administrator,
            state_dir=Path(os.getenv("LEXER_STATE_DIR", "var/registry")),
            audit_dir=Path(os.getenv("LEXER_AUDIT_DIR", "var/audit")),
            persist=_parse_bool("LEXER_PERSIST", os.getenv("LEXER_PERSIST", "true")),
            log_level=log_level,
        )

    @property
    def logging_level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)


def _parse_bool(env_var: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Expected a boolean, got '{raw}'", env_var=env_var)
