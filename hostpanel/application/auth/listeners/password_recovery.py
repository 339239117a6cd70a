"""Password recovery hint listener (AFTER phase).

Purely advisory. After a credential failure, and when the lost password
feature is enabled, the next rendering of the sign-in page shows a link to
the password recovery form. The authentication result is never changed.
"""

from hostpanel.application.auth.auth_event import AuthEvent
from hostpanel.application.auth.decisions import NO_OPINION, Decision
from hostpanel.domain.enums import AuthResultCode, ConfigKey
from hostpanel.domain.errors import AuthMessage
from hostpanel.domain.events import SignInPageRendered
from hostpanel.domain.protocols.config_provider import ConfigProvider
from hostpanel.domain.protocols.event_bus_protocol import EventBusProtocol
from hostpanel.domain.protocols.page_message_protocol import PageMessageProtocol

LOST_PASSWORD_URL = "/lostpassword.php"


class PasswordRecovery:
    """Queue a "Password lost?" hint for the next sign-in page rendering."""

    PRIORITY = -99

    def __init__(
        self,
        config: ConfigProvider,
        event_bus: EventBusProtocol,
        page_messages: PageMessageProtocol,
        *,
        lost_password_url: str = LOST_PASSWORD_URL,
    ) -> None:
        self._config = config
        self._event_bus = event_bus
        self._page_messages = page_messages
        self._lost_password_url = lost_password_url
        self._pending = False

    def handle(self, event: AuthEvent) -> Decision:
        result = event.result
        if result is None or result.code is not AuthResultCode.FAILURE_CREDENTIAL_INVALID:
            return NO_OPINION

        if not self._config.get(ConfigKey.LOST_PASSWORD_ENABLED, False):
            return NO_OPINION

        if not self._pending:
            self._pending = True
            self._event_bus.subscribe(SignInPageRendered, self._show_hint)
        return NO_OPINION

    def _show_hint(self, page_event: SignInPageRendered) -> None:
        # One-shot: the hint belongs to the rendering right after the failure
        self._event_bus.unsubscribe(SignInPageRendered, self._show_hint)
        self._pending = False
        self._page_messages.add(
            f'<strong><a href="{self._lost_password_url}">{AuthMessage.PASSWORD_LOST}</a></strong>',
            "static_error",
        )
