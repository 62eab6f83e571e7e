# health_config.py
"""
Central configuration for the health dashboard app.

- LOAD_DELAY: seconds to wait before the reading series appears on a page.
- ASSISTANT_DELAY: seconds the assistant "thinks" before a reply is shown.
- SERIES_LENGTH: number of daily readings kept in the window.
- DATA_SEED: optional seed for the mock series generator (None = random).
- LOG_LEVEL / LOG_JSON: logging verbosity and renderer.
- SERVER_NAME / SERVER_PORT: where Gradio listens.
"""

import os


def _bool_env(name: str, default: str = "false") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Simulated loading / thinking delays
LOAD_DELAY: float = _float_env("HEALTH_LOAD_DELAY", 1.0)
ASSISTANT_DELAY: float = _float_env("HEALTH_ASSISTANT_DELAY", 1.0)

# Fixed window of daily readings
SERIES_LENGTH: int = _int_env("HEALTH_SERIES_LENGTH", 30) or 30

# Seed for reproducible mock data
DATA_SEED: int | None = _int_env("HEALTH_DATA_SEED", None)

# Logging
LOG_LEVEL: str = os.getenv("HEALTH_LOG_LEVEL", "INFO").strip().upper()
LOG_JSON: bool = _bool_env("HEALTH_LOG_JSON", "false")

# Gradio server
SERVER_NAME: str = os.getenv("HEALTH_SERVER_NAME", "127.0.0.1")
SERVER_PORT: int = _int_env("HEALTH_SERVER_PORT", 7860) or 7860
