"""
Configuration management for the scale balancer.

Loads settings from scalebalancer.yaml and environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from scalebalancer.shared.exceptions import ConfigurationError

DEFAULT_CONFIG_FILE = "scalebalancer.yaml"


class ParsingConfig(BaseModel):
    """Input parsing configuration."""
    
    numeric_policy: Literal["strict", "prefix"] = "strict"
    comment_prefix: str = Field(default="#", min_length=1)


class BalancingConfig(BaseModel):
    """Balancing configuration."""
    
    order: Literal["reverse", "topological"] = "reverse"
    scale_self_mass: int = Field(default=1, ge=0)


class ReportingConfig(BaseModel):
    """Report output configuration."""
    
    format: Literal["text", "json"] = "text"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    
    level: str = "WARNING"
    format: str = "%(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """
    Main settings class for the scale balancer.
    
    Loads configuration from scalebalancer.yaml and environment variables.
    Environment variables take precedence over config file values.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="SCALEBALANCER_",
        env_nested_delimiter="__",
    )
    
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    balancing: BalancingConfig = Field(default_factory=BalancingConfig)
    reporting: ReportingConfig = Field(default_factory=ReportingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # File values arrive as init kwargs; environment wins over them.
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_config_file(config_path: Optional[Path] = None) -> dict[str, Any]:
    """
    Load configuration from YAML file.
    
    Looks for config files in order:
    1. Provided path
    2. scalebalancer.yaml in the current directory
    
    Args:
        config_path: Optional explicit path to config file
        
    Returns:
        Configuration dictionary
    """
    if config_path is not None and not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")
    
    config_files = [config_path, Path.cwd() / DEFAULT_CONFIG_FILE]
    
    for cfg_file in config_files:
        if cfg_file and cfg_file.exists():
            try:
                with open(cfg_file) as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {cfg_file}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigurationError(f"Config file {cfg_file} must contain a mapping")
            return data
    
    return {}


@lru_cache()
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get application settings (cached).
    
    Args:
        config_path: Optional path to config file
        
    Returns:
        Settings instance
    """
    config_data = load_config_file(Path(config_path) if config_path else None)
    try:
        return Settings(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def reload_settings(config_path: Optional[str] = None) -> Settings:
    """
    Reload settings, clearing the cache.
    
    Args:
        config_path: Optional path to config file
        
    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings(config_path)
