"""Configuration management for rated-ir."""

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.services import RevisionWeights, SessionConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be set with a ``RATED_IR_`` prefixed variable, e.g.
    ``RATED_IR_BETA=12`` or ``RATED_IR_FEEDBACK_MODE=binary``.
    """

    model_config = SettingsConfigDict(
        env_prefix="RATED_IR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ide-regular weights
    alpha: float = 8.0
    beta: float = 16.0
    gamma: float = 4.0

    # Session settings
    page_size: int = 10
    feedback_mode: Literal["graded", "binary"] = "graded"
    max_rating_attempts: int | None = None
    display_chars: int = 2000

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False
    log_file: Path | None = None

    @field_validator("alpha", "beta", "gamma", mode="after")
    @classmethod
    def weights_positive(cls, value: float) -> float:
        """Feedback weights must be strictly positive."""
        if value <= 0:
            raise ValueError("feedback weights must be positive")
        return value

    @field_validator("page_size", "display_chars", mode="after")
    @classmethod
    def at_least_one(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @field_validator("max_rating_attempts", mode="after")
    @classmethod
    def attempts_positive(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("max_rating_attempts must be at least 1")
        return value

    def revision_weights(self, mode: str | None = None) -> RevisionWeights | None:
        """Weights for the reviser.

        Returns None in binary mode when the weights were left at their
        graded defaults, so the binary strategy keeps its own 1/1/1.
        """
        weights = RevisionWeights(self.alpha, self.beta, self.gamma)
        if (mode or self.feedback_mode) == "binary" and weights == RevisionWeights():
            return None
        return weights

    def session_config(self) -> SessionConfig:
        return SessionConfig(
            page_size=self.page_size,
            max_rating_attempts=self.max_rating_attempts,
        )


# Global settings instance
settings = Settings()
