import os
from typing import Literal

from pydantic import BaseModel, Field


class Settings(BaseModel):
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    DEMO_DELAY: float = Field(
        default=0.0,
        ge=0.0,
        description="Seconds to wait before the deferred-callback example fires.",
    )

    @classmethod
    def load(cls) -> "Settings":
        return cls(
            LOG_LEVEL=os.getenv(
                "ARROWKIT_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")
            ).upper(),
            DEMO_DELAY=os.getenv("ARROWKIT_DEMO_DELAY", "0.0"),
        )
