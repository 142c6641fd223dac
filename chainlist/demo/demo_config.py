"""Demo runner configuration."""

from typing import Literal

from pydantic import Field, field_validator

from ..common.pydantic import FrozenBaseModel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class DemoConfig(FrozenBaseModel):
    """Which demonstration scenarios to run and how."""

    scenarios: list[str] = Field(default_factory=list)
    collection_size: int = Field(default=10, ge=1, le=10_000)
    log_level: LogLevel = "WARNING"

    @field_validator("scenarios")
    @classmethod
    def _known_scenarios(cls, names: list[str]) -> list[str]:
        from .scenarios import SCENARIOS

        unknown = [name for name in names if name not in SCENARIOS]
        if unknown:
            raise ValueError(f"Unknown scenarios: {', '.join(unknown)}")
        return names
