"""Configuration-related exceptions for rated-ir."""

from .base import RatedIRError


class ConfigurationError(RatedIRError):
    """Configuration or environment variable errors.

    Raised when required configuration is missing or invalid.
    """

    error_code = "RIR_CFG_001"


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid (e.g. a non-positive feedback weight)."""

    error_code = "RIR_CFG_002"
