"""
Configuration settings for the parcel boundary engine
"""

from dataclasses import dataclass
from typing import Optional
import os


STORE_BACKENDS = ("json", "memory")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EngineConfig:
    """Engine configuration"""
    # Directory holding one JSON document per parcel boundary
    store_dir: str = "boundaries"
    
    # Storage backend: "json" (durable, file per parcel) or "memory"
    store_backend: str = "json"
    
    # Logging
    log_level: str = "INFO"


# Global config instance
config = EngineConfig()


def get_config() -> EngineConfig:
    """Get global configuration"""
    return config


def load_config_from_env(base: Optional[EngineConfig] = None) -> EngineConfig:
    """
    Build a config from environment variables, falling back to ``base``
    (or the defaults) for anything not set.
    
    Recognised variables:
        PARCEL_BOUNDARY_STORE_DIR
        PARCEL_BOUNDARY_STORE_BACKEND
        PARCEL_BOUNDARY_LOG_LEVEL
    """
    base = base or EngineConfig()
    return EngineConfig(
        store_dir=os.environ.get("PARCEL_BOUNDARY_STORE_DIR", base.store_dir),
        store_backend=os.environ.get("PARCEL_BOUNDARY_STORE_BACKEND", base.store_backend),
        log_level=os.environ.get("PARCEL_BOUNDARY_LOG_LEVEL", base.log_level).upper(),
    )


def validate_config(config: EngineConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []
    
    if config.store_backend not in STORE_BACKENDS:
        errors.append(
            f"store_backend must be one of {', '.join(STORE_BACKENDS)}, got {config.store_backend!r}"
        )
    
    # The JSON backend needs somewhere to write
    if config.store_backend == "json" and not config.store_dir:
        errors.append("store_dir is required for the json store backend but not set")
    
    if config.log_level not in LOG_LEVELS:
        errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {config.log_level!r}")
    
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
