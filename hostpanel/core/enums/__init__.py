"""Core enums package.

Usage:
    from hostpanel.core.enums import ErrorCode, Environment
"""

from hostpanel.core.enums.environment import Environment
from hostpanel.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
