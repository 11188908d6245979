"""Runtime settings read from the environment (and a .env file via the CLI)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    think_delay: float = 1.0  # seconds before an opponent acts
    max_turns: int = 1000
    discard_preview: int = 5


def _read(env: Mapping[str, str], key: str, cast, default):
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {key}: {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from UNO_* variables; unset or empty ones keep defaults."""
    env = os.environ if env is None else env
    settings = Settings(
        seed=_read(env, "UNO_SEED", int, None),
        think_delay=_read(env, "UNO_THINK_DELAY", float, 1.0),
        max_turns=_read(env, "UNO_MAX_TURNS", int, 1000),
        discard_preview=_read(env, "UNO_DISCARD_PREVIEW", int, 5),
    )
    if settings.think_delay < 0:
        raise ValueError("UNO_THINK_DELAY must not be negative")
    if settings.max_turns <= 0:
        raise ValueError("UNO_MAX_TURNS must be positive")
    return settings
