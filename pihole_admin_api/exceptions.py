from typing import Optional


class PiholeError(Exception):
    """Base exception for Pi-hole client errors."""

    pass


class PiholeAPIError(PiholeError):
    """Raised when a request to the Pi-hole admin API fails in transport."""

    pass


class PiholeDataError(PiholeError):
    """Raised when a Pi-hole response cannot be decoded into the expected shape."""

    pass


class PiholeStatusError(PiholeError):
    """Raised when an enable/disable call does not report the expected status."""

    def __init__(self, expected: str, actual: Optional[str]):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected Pi-hole status '{expected}', got {actual!r}"
        )
