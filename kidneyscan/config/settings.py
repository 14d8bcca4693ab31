from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kidneyscan.simulation.roster import ANALYSIS_ALGORITHMS
from kidneyscan.simulation.simulator import ticks_to_complete


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    tick_interval_ms: int = Field(default=50, gt=0)
    step_interval_ms: int = Field(default=2000, gt=0)
    image_window_ms: int = Field(default=10000, gt=0)
    document_window_ms: int = Field(default=15000, gt=0)
    reveal_grace_ms: int = Field(default=1000, ge=0)

    # Divides wall-clock waits only; simulated arithmetic is unaffected.
    clock_speed: float = Field(default=1.0, gt=0)

    @model_validator(mode="after")
    def _algorithms_complete_before_reveal(self) -> "Settings":
        """Every algorithm's completing tick must land strictly before the reveal."""
        reveal_ms = max(spec.duration_ms for spec in ANALYSIS_ALGORITHMS) + self.reveal_grace_ms
        for spec in ANALYSIS_ALGORITHMS:
            ticks = ticks_to_complete(spec, self.tick_interval_ms)
            completes_at_ms = ticks * self.tick_interval_ms
            if completes_at_ms >= reveal_ms:
                raise ValueError(
                    f"'{spec.name}' completes at {completes_at_ms} ms with "
                    f"tick_interval_ms={self.tick_interval_ms}, not before the reveal at "
                    f"{reveal_ms} ms; shorten the tick or lengthen reveal_grace_ms"
                )
        return self
