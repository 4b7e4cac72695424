from .settings import ConfigError, ConverterConfig, SUPPORTED_PARSERS, load_config

__all__ = ["ConfigError", "ConverterConfig", "SUPPORTED_PARSERS", "load_config"]
