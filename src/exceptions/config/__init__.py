from src.exceptions.config.config_error import ConfigError

__all__ = ["ConfigError"]
