"""Configuration through environment variables (optionally from .env)."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from rotation.scheduler import RotationStrategy

ROOT = pathlib.Path(__file__).resolve().parent.parent


@dataclass(frozen=True, slots=True)
class Settings:
    data_path:  pathlib.Path
    images_dir: pathlib.Path
    rotation:   RotationStrategy
    workers:    int
    timeout:    float


def _positive(name: str, raw: str, cast: type[int] | type[float]) -> int | float:
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def get_settings() -> Settings:
    load_dotenv(ROOT / ".env")
    rotation = os.getenv("MOTD_ROTATION", RotationStrategy.FULL_CYCLE.value)
    try:
        strategy = RotationStrategy(rotation)
    except ValueError as exc:
        choices = ", ".join(s.value for s in RotationStrategy)
        raise ValueError(f"MOTD_ROTATION must be one of {choices}, got {rotation!r}") from exc

    return Settings(
        data_path  = pathlib.Path(os.getenv("MOTD_DATA",       "misconceptions.json")),
        images_dir = pathlib.Path(os.getenv("MOTD_IMAGES_DIR", "public/images")),
        rotation   = strategy,
        workers    = int(_positive("MOTD_WORKERS", os.getenv("MOTD_WORKERS", "3"), int)),
        timeout    = float(_positive("MOTD_TIMEOUT", os.getenv("MOTD_TIMEOUT", "30"), float)),
    )
