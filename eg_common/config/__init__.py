"""Configuration helpers shared across examgrid packages."""

from eg_common.config.env import parse_bool_env, parse_int_env
from eg_common.config.settings import GridSettings, load_settings

__all__ = ["GridSettings", "load_settings", "parse_bool_env", "parse_int_env"]
