import os
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    LOG_LEVEL: str = Field(default="INFO")
    RANDOM_SEED: Optional[int] = Field(
        default=None,
        description="Seed used by sampling helpers when no generator is passed.",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def load(cls) -> "Settings":
        seed = os.getenv("SEQQUERY_RANDOM_SEED")

        return cls(
            LOG_LEVEL=os.getenv("SEQQUERY_LOG_LEVEL", "INFO"),
            RANDOM_SEED=int(seed) if seed not in (None, "") else None,
        )


settings = Settings.load()
