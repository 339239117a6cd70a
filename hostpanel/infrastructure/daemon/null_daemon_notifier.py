"""DaemonNotifier used when no backend daemon is configured."""


class NullDaemonNotifier:
    """Accept every notification without contacting anything."""

    def notify(self) -> bool:
        return True
