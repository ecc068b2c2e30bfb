"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables each time it is instantiated.  A ``.env`` file
in the working directory, if present, is loaded first so that local
development does not require exporting variables by hand.  Defaults
are provided for every field except the MongoDB connection string,
which must be supplied for the data routes to work.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def _cors_origins(value: str) -> List[str]:
    # An empty list would disable CORS entirely; treat blank as "any origin".
    origins = [item.strip() for item in value.split(",") if item.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Event Registration API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: _env("LOG_FILE") or None)

    # Connection string for MongoDB (Atlas or self‑hosted).  Left empty
    # by default; the data routes answer with HTTP 500 until it is set.
    mongodb_uri: str = field(default_factory=lambda: _env("MONGODB_URI"))
    database_name: str = field(default_factory=lambda: _env("DATABASE_NAME", "bit-hackathon"))
    collection_name: str = field(default_factory=lambda: _env("COLLECTION_NAME", "registrations"))
    # Server selection timeout applied to the connect handshake so that an
    # unreachable cluster fails the request instead of hanging it.
    mongodb_timeout_ms: int = field(default_factory=lambda: int(_env("MONGODB_TIMEOUT_MS", "5000")))

    host: str = field(default_factory=lambda: _env("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3001")))
    # ``production`` means an external host (serverless platform, process
    # manager) drives the ASGI app; the built‑in server refuses to bind.
    environment: str = field(default_factory=lambda: _env("APP_ENV", "development"))

    cors_origins: List[str] = field(default_factory=lambda: _cors_origins(_env("CORS_ORIGINS", "*")))

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
