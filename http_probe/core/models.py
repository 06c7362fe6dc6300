from dataclasses import dataclass, field
from typing import Optional, List, Tuple
from enum import Enum


# Ordered (key, value) pairs; duplicates and wire order are kept
HeaderList = List[Tuple[str, str]]

TOTAL_LENGTH_HEADER = "Total Length"
RESPONSE_TIME_HEADER = "Response Time"


@dataclass
class Request:
    """A request as read from a saved proxy capture."""

    method: str = ""
    url: str = ""
    host: str = ""
    scheme: str = ""
    path: str = ""
    headers: HeaderList = field(default_factory=list)
    body: str = ""

    def get_header(self, name: str, default: str = "") -> str:
        """Get the first header value matching name case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default


@dataclass
class Response:
    """A normalized response; status_code 0 means nothing was received."""

    status: str = ""
    status_code: int = 0
    content_type: str = ""
    location: str = ""
    headers: HeaderList = field(default_factory=list)
    body: str = ""
    length: int = 0
    response_time: float = 0.0
    beautify: str = ""
    beautify_headers: str = ""

    @property
    def is_empty(self) -> bool:
        return self.status_code == 0

    @property
    def raw_headers(self) -> HeaderList:
        """Headers as received, without the two synthetic trailing entries."""
        return [
            (key, value)
            for key, value in self.headers
            if key not in (TOTAL_LENGTH_HEADER, RESPONSE_TIME_HEADER)
        ]


class RedirectAction(Enum):
    CONTINUE = "continue"
    STOP = "stop"
    FAIL = "fail"


@dataclass
class RedirectDecision:
    """Outcome of inspecting the first response when redirects are not followed."""

    action: RedirectAction
    response: Optional[Response] = None
    error: Optional[Exception] = None

    @classmethod
    def proceed(cls) -> "RedirectDecision":
        return cls(RedirectAction.CONTINUE)

    @classmethod
    def captured(cls, response: Response) -> "RedirectDecision":
        return cls(RedirectAction.STOP, response=response)

    @classmethod
    def failed(cls, error: Exception) -> "RedirectDecision":
        return cls(RedirectAction.FAIL, error=error)
