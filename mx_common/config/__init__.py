"""Configuration helpers for mx_common."""

from .env import env_value, parse_bool_env, parse_int_env

__all__ = [
    "env_value",
    "parse_bool_env",
    "parse_int_env",
]
