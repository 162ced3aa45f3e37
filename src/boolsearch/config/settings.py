import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file from the project root
# This file: src/boolsearch/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Global Application Settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Project Paths
    ROOT_DIR: Path = Field(default=SERVER_ROOT, description="Project root directory")

    # Term index
    INDEX_BACKEND: str = Field(default="memory", description="Term index backend: memory, sqlite, duckdb")
    SQLITE_PATH: str = Field(default="storage/term_index.db", description="Path to SQLite term index")
    DUCKDB_PATH: str = Field(default="storage/term_index.duckdb", description="Path to DuckDB term index")

    # Ranking
    SORT_ORDER: str = Field(default="descending", description="Default ranking order: ascending, descending")

    # Tracing
    TRACING_ENABLED: bool = Field(default=False, description="Initialize OpenTelemetry tracing at startup")
    OTEL_SERVICE_NAME: str = Field(default="boolsearch", description="Service name reported in spans")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True
    }


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        ENV=os.getenv("ENV", "development"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        ROOT_DIR=SERVER_ROOT,
        INDEX_BACKEND=os.getenv("INDEX_BACKEND", "memory"),
        SQLITE_PATH=os.getenv("SQLITE_PATH", str(SERVER_ROOT / "storage/term_index.db")),
        DUCKDB_PATH=os.getenv("DUCKDB_PATH", str(SERVER_ROOT / "storage/term_index.duckdb")),
        SORT_ORDER=os.getenv("SORT_ORDER", "descending"),
        TRACING_ENABLED=_env_flag("TRACING_ENABLED"),
        OTEL_SERVICE_NAME=os.getenv("OTEL_SERVICE_NAME", "boolsearch"),
    )

# Global settings instance
settings = load_settings()
