"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested values use a double underscore, e.g. ``RUNNER_PHYSICS__GRAVITY=0.6``.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhysicsSettings(BaseModel):
    """Player physics, in pixels per tick."""

    gravity: float = 0.5
    jump_power: float = Field(default=-12.0, lt=0.0)
    player_width: float = Field(default=30.0, gt=0.0)
    player_height: float = Field(default=30.0, gt=0.0)
    max_jumps: int = Field(default=2, ge=1)


class DifficultySettings(BaseModel):
    """Speed and spawn-rate scaling as a function of score."""

    base_speed: float = Field(default=5.0, ge=0.0)
    speed_increment: float = Field(default=0.0002, ge=0.0)
    max_speed: float = Field(default=12.0, ge=0.0)

    base_spawn_rate: float = Field(default=0.015, ge=0.0, le=1.0)
    spawn_rate_increment: float = Field(default=0.00005, ge=0.0)
    max_spawn_rate: float = Field(default=0.04, ge=0.0, le=1.0)


class ObstacleSettings(BaseModel):
    """Obstacle geometry."""

    width: float = Field(default=30.0, gt=0.0)
    height: float = Field(default=40.0, gt=0.0)


class InputSettings(BaseModel):
    """Activation handling."""

    double_tap_window_ms: float = Field(default=300.0, ge=0.0)


class WindowSettings(BaseModel):
    """Desktop window settings."""

    width: int = Field(default=800, ge=1)
    height: int = Field(default=450, ge=1)
    ground_margin: float = Field(default=50.0, ge=0.0)
    fps: int = Field(default=60, ge=1)
    fullscreen: bool = False
    title: str = "Endless Runner"


class StorageSettings(BaseModel):
    """Best-score persistence."""

    best_score_path: Path = Field(
        default_factory=lambda: Path.home() / ".endless_runner" / "best_score.json"
    )
    best_score_key: str = "bestScore"


class ShareSettings(BaseModel):
    """Share message settings."""

    title: str = "Endless Runner"
    url: str = "https://example.com/endless-runner"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="RUNNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    log_file: Path = Path("endless_runner.log")

    # Nested settings
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    difficulty: DifficultySettings = Field(default_factory=DifficultySettings)
    obstacles: ObstacleSettings = Field(default_factory=ObstacleSettings)
    input: InputSettings = Field(default_factory=InputSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    share: ShareSettings = Field(default_factory=ShareSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
