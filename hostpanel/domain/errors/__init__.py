"""Domain error and message constants."""

from hostpanel.domain.errors.auth_messages import AuthMessage

__all__ = ["AuthMessage"]
