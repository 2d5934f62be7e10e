"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every tunable comes from SPINWHEEL_* environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process
    - Defaults reproduce the shipped game exactly

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Core modules never import this: the shell passes values down explicitly
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spinwheel.core.spin_physics import SpinTuning


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPINWHEEL_", env_file=".env", case_sensitive=False,
    )

    # Deck
    total_segments: int = 20
    catalog_path: str | None = None

    # Spin
    early_spin_guard: int = 5
    base_revolutions: int = 5
    velocity_scale: float = 20.0
    max_velocity_bonus: float = 30.0
    base_duration_ms: int = 4000
    duration_per_revolution_ms: int = 200
    jitter_fraction: float = 0.8

    # Buzzer
    buzzer_enabled: bool = True
    buzzer_chance: float = 0.33
    buzzer_countdown_seconds: int = 20

    # Players
    default_player_count: int = 2

    # Randomness: set for reproducible games
    random_seed: int | None = None

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("total_segments")
    @classmethod
    def positive_segments(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("total_segments must be positive")
        return v

    @field_validator("buzzer_chance")
    @classmethod
    def probability(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("buzzer_chance must be within [0, 1]")
        return v

    @field_validator("jitter_fraction")
    @classmethod
    def jitter_below_one_segment(cls, v: float) -> float:
        # jitter is split either side of center; 1.0 would reach the neighbor
        if not 0.0 <= v < 1.0:
            raise ValueError("jitter_fraction must be within [0, 1)")
        return v

    @property
    def spin_tuning(self) -> SpinTuning:
        return SpinTuning(
            base_revolutions=self.base_revolutions,
            velocity_scale=self.velocity_scale,
            max_velocity_bonus=self.max_velocity_bonus,
            base_duration_ms=self.base_duration_ms,
            duration_per_revolution_ms=self.duration_per_revolution_ms,
            jitter_fraction=self.jitter_fraction,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
