"""
Configuration Infrastructure

JSON file-based configuration loader and environment variable parsing
"""

from .loader import JsonConfigLoader, TemplateTreeConfig, load_config
from .env_utils import parse_bool_env, parse_str_env

__all__ = [
    "JsonConfigLoader",
    "TemplateTreeConfig",
    "load_config",
    "parse_bool_env",
    "parse_str_env",
]
