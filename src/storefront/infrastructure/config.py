"""Runtime settings read from the environment.

Every setting has a default that works for local use, so running the
CLI from a checkout needs no configuration at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

DEFAULT_PASSWORD_ITERATIONS = 240_000


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    environment: str = "development"
    log_level: str = "DEBUG"
    log_dir: Path | None = None
    password_iterations: int = DEFAULT_PASSWORD_ITERATIONS

    @property
    def is_production_like(self) -> bool:
        return self.environment in ("production", "staging")


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    environment = (env.get("ENVIRONMENT") or "development").lower()
    log_level = env.get("LOG_LEVEL") or _LEVEL_BY_ENVIRONMENT.get(environment, "INFO")
    log_dir = env.get("STOREFRONT_LOG_DIR")

    raw_iterations = env.get("STOREFRONT_PASSWORD_ITERATIONS")
    try:
        iterations = int(raw_iterations) if raw_iterations else DEFAULT_PASSWORD_ITERATIONS
    except ValueError as exc:
        raise ValueError(
            f"STOREFRONT_PASSWORD_ITERATIONS must be an integer, got {raw_iterations!r}"
        ) from exc

    return Settings(
        data_dir=Path(env.get("STOREFRONT_DATA_DIR") or _PROJECT_ROOT / "data"),
        environment=environment,
        log_level=log_level.upper(),
        log_dir=Path(log_dir) if log_dir else None,
        password_iterations=iterations,
    )
