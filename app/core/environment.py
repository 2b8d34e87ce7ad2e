import os
from pathlib import Path

DEFAULT_VEHICLES_FILE = Path(__file__).resolve().parent.parent / "data" / "vehicles.json"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def is_production() -> bool:
    """Detects if running in production via PRODUCTION variable"""
    return _env_bool("PRODUCTION", False)

def get_vehicles_file() -> Path:
    """Returns the path of the JSON file holding the initial catalog"""
    return Path(os.getenv("VEHICLES_FILE", str(DEFAULT_VEHICLES_FILE)))

def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()

def is_json_logging() -> bool:
    """JSON log lines by default; plain text when LOG_JSON is false"""
    return _env_bool("LOG_JSON", True)

def is_rate_limit_enabled() -> bool:
    return _env_bool("RATE_LIMIT_ENABLED", True)

def get_rate_limit_default() -> str:
    """Default slowapi limit string, e.g. '100/minute'"""
    return os.getenv("RATE_LIMIT_DEFAULT", "100/minute")

def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")

def get_port() -> int:
    return int(os.getenv("PORT", "8080"))
