# =============================================================================
# core/config.py  —  Process Configuration (the API key and friends)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the BlazeSQL API key ONCE at process start, from the environment
#   or from a .env file (via python-dotenv).  After that the key is
#   read-only and gets passed explicitly into every adapter call.
#
# FAIL FAST:
#   A server without a key can't answer a single query, so we refuse to
#   start instead of failing every call.  load_settings() raises
#   ConfigurationError; the server's main() turns that into exit(1).
#
# NEVER LOG THE KEY:
#   Use mask_secret() whenever the key needs to appear in a log line.
# =============================================================================

import os
from dataclasses import dataclass

from dotenv import load_dotenv

API_KEY_ENV_VAR = "BLAZE_API_KEY"
LOG_LEVEL_ENV_VAR = "BLAZESQL_LOG_LEVEL"


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


@dataclass(frozen=True)
class Settings:
    api_key: str
    log_level: str = "INFO"

    @property
    def masked_api_key(self) -> str:
        return mask_secret(self.api_key)


def mask_secret(secret: str) -> str:
    """Show only the edges of a secret, e.g. 'abcd…wxyz'."""
    if len(secret) <= 8:
        return "*" * len(secret)
    return f"{secret[:4]}…{secret[-4:]}"


def load_settings(use_dotenv: bool = True) -> Settings:
    """Load settings from the environment (and .env, unless disabled).

    Raises:
        ConfigurationError: if BLAZE_API_KEY is unset or blank.
    """
    if use_dotenv:
        # Existing environment variables win over the .env file.
        load_dotenv(override=False)

    api_key = os.getenv(API_KEY_ENV_VAR, "").strip()
    if not api_key:
        raise ConfigurationError(
            f"{API_KEY_ENV_VAR} environment variable is not set. "
            "Create a .env file based on .env.example and add your API key."
        )

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").strip().upper() or "INFO"
    return Settings(api_key=api_key, log_level=log_level)
