"""Deployment environments known to Settings."""

from enum import Enum


class Environment(str, Enum):
    """Where the panel runs.

    DEVELOPMENT logs human-readable lines; the others log JSON.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
