import time
from typing import Callable, Optional

NOTIFICATION_TIMEOUT_SECONDS = 4.0


class ConsoleNotifier:
    """Status message surface.

    `notify` shows a transient message that is considered dismissed after
    NOTIFICATION_TIMEOUT_SECONDS; `alert` is a blocking message that needs
    the user's attention (printed to the console either way).

    A console cannot un-print a line, so nothing in the app hides a message
    after the timeout; `current` exists for front ends that redraw a status
    area and need to know whether the last message is still visible.
    """

    def __init__(
        self,
        timeout: float = NOTIFICATION_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeout = timeout
        self.clock = clock
        self._message: Optional[str] = None
        self._shown_at = 0.0

    def notify(self, message: str) -> None:
        self._message = message
        self._shown_at = self.clock()
        print(message)

    def alert(self, message: str) -> None:
        print(f"[!] {message}")

    def current(self) -> Optional[str]:
        """Возвращает активное уведомление или None, если оно уже скрыто."""

        if self._message is None:
            return None
        if self.clock() - self._shown_at >= self.timeout:
            self._message = None
        return self._message
