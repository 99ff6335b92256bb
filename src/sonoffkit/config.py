import os
from typing import Optional

from dotenv import load_dotenv, find_dotenv

from sonoffkit.errors import ConfigError

load_dotenv(find_dotenv(usecwd=True))

DEFAULT_TIMEOUT = 5.0


def device_id() -> str:
    return os.getenv("SONOFF_DEVICE_ID", "")


def address() -> Optional[str]:
    return os.getenv("SONOFF_ADDRESS") or None


def timeout() -> float:
    raw = os.getenv("SONOFF_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"SONOFF_TIMEOUT must be a number of seconds, got {raw!r}")
