import json
import os
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator
import logging

from safename.models.options import SanitizeOptions

logger = logging.getLogger(__name__)

CONFIG_PATH = os.getenv("CONFIG_PATH", "config.json")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    format: str = Field(default="%(message)s", description="Log format")
    enable_rich: bool = Field(default=True, description="Enable rich console logging")

    @field_validator('level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


class ApiConfig(BaseModel):
    title: str = Field(default="safename", description="API title")
    version: str = Field(default="1.0.0", description="API version")
    max_name_length: int = Field(default=4096, ge=1, description="Longest raw name accepted per request")
    cors_origins: list = Field(default=["*"], description="CORS allowed origins")
    debug: bool = Field(default=False, description="Enable debug mode")


class Config(BaseModel):
    """Main configuration model"""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    defaults: SanitizeOptions = Field(default_factory=SanitizeOptions)

    @classmethod
    def load_from_file(cls, config_path: str = "config.json") -> "Config":
        """Load configuration from JSON file"""
        if os.path.exists(config_path):
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    config_data = json.load(f)
                logger.info(f"Configuration loaded from {config_path}")
                return cls(**config_data)
            except (OSError, ValueError, TypeError) as e:
                logger.error(f"Failed to load config from {config_path}: {str(e)}")
                logger.info("Using default configuration")
        else:
            logger.warning(f"Config file {config_path} not found, using defaults")

        return cls()

    @classmethod
    def load_from_env(cls) -> "Config":
        """Load configuration from environment variables (fallback)"""
        try:
            config_data = cls._env_data()
            return cls(**config_data) if config_data else cls()
        except ValueError as e:
            logger.error(f"Invalid configuration in environment: {str(e)}")
            return cls()

    @staticmethod
    def _env_data() -> Dict[str, Any]:
        config_data: Dict[str, Any] = {}

        # Logging
        if os.getenv("LOG_LEVEL"):
            config_data["logging"] = {"level": os.getenv("LOG_LEVEL")}

        # API
        if os.getenv("MAX_NAME_LENGTH"):
            config_data["api"] = {"max_name_length": int(os.getenv("MAX_NAME_LENGTH"))}

        # Sanitizer defaults
        defaults: Dict[str, Any] = {}
        if os.getenv("DEFAULT_PADDING"):
            defaults["padding"] = int(os.getenv("DEFAULT_PADDING"))
        if os.getenv("DEFAULT_LENGTH"):
            defaults["length"] = int(os.getenv("DEFAULT_LENGTH"))
        if os.getenv("DEFAULT_WHITESPACE") is not None:
            defaults["whitespace"] = os.getenv("DEFAULT_WHITESPACE")
        if os.getenv("DEFAULT_REPLACE") is not None:
            defaults["replace"] = os.getenv("DEFAULT_REPLACE")
        if defaults:
            config_data["defaults"] = defaults

        return config_data

    def save_to_file(self, config_path: str = "config.json"):
        """Save configuration to JSON file"""
        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                json.dump(self.model_dump(), f, indent=2, ensure_ascii=False)
            logger.info(f"Configuration saved to {config_path}")
        except OSError as e:
            logger.error(f"Failed to save config to {config_path}: {str(e)}")


def load_config(config_path: str = CONFIG_PATH) -> Config:
    """Load configuration with priority: config file > env vars > defaults"""
    if os.path.exists(config_path):
        return Config.load_from_file(config_path)

    logger.info(f"Config file not found at {config_path}, checking environment variables")
    return Config.load_from_env()


# Global config instance
config = load_config()
