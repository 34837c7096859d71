"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _split_names(raw: str) -> List[str]:
    """Split a comma-separated list of names, keeping empty items out."""
    return [name.strip() for name in raw.split(",") if name.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix applied to every route.  Empty by default so the users
    # collection lives at ``/users``; set e.g. ``API_PREFIX=/api/v1`` to
    # mount it elsewhere.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Initial contents of the user store, as a comma-separated list.
    seed_users: List[str] = field(
        default_factory=lambda: _split_names(os.getenv("SEED_USERS", "Ram,Shyam,Rita"))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
