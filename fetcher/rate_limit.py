"""Wait strategies called before or after each external request."""
import logging
import time

logger = logging.getLogger(__name__)


class FixedDelay:
    """Sleeps for a fixed number of seconds on every call."""

    def __init__(self, seconds: float):
        if seconds < 0:
            raise ValueError(f"Delay must not be negative: {seconds}")
        self.seconds = seconds

    @classmethod
    def from_millis(cls, millis: int) -> 'FixedDelay':
        return cls(millis / 1000.0)

    def __call__(self) -> None:
        if self.seconds:
            logger.debug(f"Sleeping {self.seconds}s before next request")
            time.sleep(self.seconds)


def no_wait() -> None:
    """Wait strategy that returns immediately."""
