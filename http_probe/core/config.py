"""Configuration classes for http-probe."""

from dataclasses import dataclass
from typing import Dict, List, Tuple


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_3) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/80.0.3987.132 Safari/537.36"
)

DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.8",
}

# Connection limits are fixed, not user configurable
MAX_IDLE_CONNECTIONS = 100
MAX_CONNECTIONS_PER_HOST = 1000


@dataclass(frozen=True)
class Options:
    """Per-invocation probing options."""

    # Seconds, applied to every protocol phase
    timeout: float = 10.0

    # Transport retries, only used when > 0
    retry: int = 0

    # Raw "Key: Value" strings supplied by the user
    headers: Tuple[str, ...] = ()

    # Route client logs to the console instead of dropping them
    debug: bool = False

    # Follow redirects instead of capturing the first one
    redirect: bool = False

    @property
    def retry_wait(self) -> float:
        """Initial wait between retries."""
        return self.timeout / 2

    @property
    def retry_max_wait(self) -> float:
        """Upper bound for the wait between retries."""
        return self.timeout

    def validate(self) -> List[str]:
        """Validate options and return list of errors."""
        errors = []

        if self.timeout <= 0:
            errors.append("timeout must be positive")

        if self.retry < 0:
            errors.append("retry cannot be negative")

        return errors
