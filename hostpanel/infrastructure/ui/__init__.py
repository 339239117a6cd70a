"""User-facing page message adapters."""

from hostpanel.infrastructure.ui.flash_messenger import FlashMessenger, PageMessage

__all__ = ["FlashMessenger", "PageMessage"]
