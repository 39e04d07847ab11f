"""
Central configuration for the surface rendering service.
All render defaults and environment-driven settings live here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

HEX_COLOR_PATTERN = r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"

FunctionName = Literal[
    "f1", "schaffer",
    "f2", "eggbox",
    "f3", "sinc",
    "f4", "moguls",
    "f5", "saddle",
]


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    # ── Canvas ──────────────────────────────────────────────────────
    CANVAS_WIDTH: int = Field(600, gt=0)
    CANVAS_HEIGHT: int = Field(320, gt=0)

    # ── Sampling grid ───────────────────────────────────────────────
    GRID_CELLS: int = Field(100, gt=0)
    XY_RANGE: float = Field(30.0, gt=0)  # domain is -XY_RANGE/2..+XY_RANGE/2

    # ── Colors & surface ────────────────────────────────────────────
    LOWEST_COLOR: str = Field("#0000ff", pattern=HEX_COLOR_PATTERN)  # blue
    HIGHEST_COLOR: str = Field("#ff0000", pattern=HEX_COLOR_PATTERN)  # red
    SURFACE_FUNCTION: FunctionName = "f1"  # schaffer

    # ── Server ──────────────────────────────────────────────────────
    HOST: str = "localhost"
    PORT: int = 80
    STREAM_BUFFER_CELLS: int = Field(64, ge=2)  # template chunks joined per write

    # ── Paths ───────────────────────────────────────────────────────
    PROJECT_ROOT: Path = Path(__file__).parent
    STATIC_DIR: Optional[Path] = None

    @model_validator(mode="after")
    def _set_default_paths(self) -> Settings:
        if self.STATIC_DIR is None:
            self.STATIC_DIR = self.PROJECT_ROOT / "static"
        return self

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton instance
settings = Settings()
