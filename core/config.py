# =============================================================================
# core/config.py  —  Process Configuration (the API key, resolved once)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the process environment into a frozen Settings value.  The only
#   required input is RUNPOD_API_KEY; everything else has a default.
#
# WHEN IT RUNS:
#   Exactly once, at startup (main.py).  The resulting Settings is handed to
#   RunPodClient, which keeps it for the lifetime of the process.  Nothing
#   else in the codebase reads the environment.
#
# FAILURE MODE:
#   A missing or blank key raises ConfigError.  main.py turns that into a
#   stderr message and exit status 1 before any tool is registered.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

API_KEY_ENV_VAR = "RUNPOD_API_KEY"
DEFAULT_BASE_URL = "https://rest.runpod.io/v1"


class ConfigError(Exception):
    """Raised when required configuration is missing at startup."""


@dataclass(frozen=True)
class Settings:
    """Read-only configuration shared by every outbound request."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        return f"Settings(api_key='***', base_url={self.base_url!r})"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from.  Defaults to os.environ; tests pass a
                 plain dict instead of patching the real environment.

    Returns:
        A frozen Settings instance.

    Raises:
        ConfigError: If RUNPOD_API_KEY is absent or blank.
    """
    if environ is None:
        environ = os.environ

    api_key = (environ.get(API_KEY_ENV_VAR) or "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV_VAR} environment variable is required")

    return Settings(api_key=api_key)
