"""Backend daemon notifier over TCP.

The backend daemon applies pending account changes (rows whose status asks
for processing, such as "tochangepwd"). The panel wakes it up with a short
line-based conversation:

    <- 250 <greeting>
    -> helo <panel version>
    <- 250 ...
    -> execute backend command
    <- 250 ...
    -> bye
    <- 250 ...

Every answer must start with code 250.
"""

import socket

from hostpanel.domain.protocols.logger_protocol import LoggerProtocol

ANSWER_OK = 250


class DaemonProtocolError(Exception):
    """Daemon answered with something other than code 250."""


class SocketDaemonNotifier:
    """DaemonNotifier talking to the backend daemon over TCP.

    A notifier sends at most one successful request; later calls return True
    without reconnecting. Failures are logged and reported as False so that
    callers never fail because the backend is down.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        version: str,
        host: str = "127.0.0.1",
        port: int = 9876,
        timeout: float = 5.0,
    ) -> None:
        """Initialize notifier.

        Args:
            logger: Logger for connection and protocol errors.
            version: Panel version announced with ``helo``.
            host: Daemon host.
            port: Daemon TCP port.
            timeout: Socket timeout in seconds.
        """
        self._logger = logger
        self.version = version
        self.host = host
        self.port = port
        self.timeout = timeout
        self._sent = False

    @property
    def sent(self) -> bool:
        """Whether a request was already delivered."""
        return self._sent

    def notify(self) -> bool:
        """Ask the backend daemon to process pending changes.

        Returns:
            bool: True if delivered (now or earlier), False on any error.
        """
        if self._sent:
            return True

        try:
            with socket.create_connection(
                (self.host, self.port), timeout=self.timeout
            ) as conn, conn.makefile("rw", encoding="utf-8", newline="\n") as stream:
                self._read_answer(stream)
                for command in (
                    f"helo {self.version}",
                    "execute backend command",
                    "bye",
                ):
                    stream.write(f"{command}\n")
                    stream.flush()
                    self._read_answer(stream)
        except OSError as e:
            self._logger.error(
                "daemon_connection_failed",
                host=self.host,
                port=self.port,
                error=e,
            )
            return False
        except DaemonProtocolError as e:
            self._logger.error(
                "daemon_unexpected_answer",
                host=self.host,
                port=self.port,
                answer=str(e),
            )
            return False

        self._sent = True
        self._logger.debug("daemon_request_sent", host=self.host, port=self.port)
        return True

    @staticmethod
    def _read_answer(stream) -> str:  # type: ignore[no-untyped-def]
        answer = stream.readline(1024)
        if not answer:
            raise DaemonProtocolError("connection closed by daemon")

        code = answer.split(" ", 1)[0].strip()
        if not code.isdigit() or int(code) != ANSWER_OK:
            raise DaemonProtocolError(answer.strip())
        return answer
