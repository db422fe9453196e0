"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local MongoDB without any setup.  In a
production deployment override at least ``SECRET_KEY`` and
``MONGO_URL``.
"""

import os
from dataclasses import dataclass


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "UberApp API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/v1")
    debug: bool = _flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # MongoDB connection string and database name.  One client (and its
    # connection pool) is shared by the process; each request gets its
    # own session, see ``core.db.get_store``.
    mongo_url: str = os.getenv("MONGO_URL", "mongodb://localhost:27017")
    mongo_database: str = os.getenv("MONGO_DATABASE", "uberapp")

    # Token signing.  Tokens carry ``iss``/``sub``/``exp`` plus the
    # custom ``userID`` claim.
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    algorithm: str = os.getenv("ALGORITHM", "HS256")
    token_issuer: str = os.getenv("TOKEN_ISSUER", "uberapp")
    token_subject: str = os.getenv("TOKEN_SUBJECT", "uberapp")
    token_ttl_seconds: int = int(os.getenv("TOKEN_TTL_SECONDS", str(12 * 3600)))

    # bcrypt work factor; 4 is the lowest value bcrypt accepts.
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # Older clients expect bad list query parameters to come back with
    # HTTP 200 and an error body.  Leave disabled to get a 400.
    legacy_query_errors: bool = _flag("LEGACY_QUERY_ERRORS")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
