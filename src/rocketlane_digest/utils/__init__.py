"""
Utility modules for Rocketlane Digest.
"""

from .environment import get_env_var, get_env_var_bool, get_env_var_int

__all__ = ["get_env_var", "get_env_var_bool", "get_env_var_int"]
