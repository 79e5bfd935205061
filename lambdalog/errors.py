"""Errors raised while browsing functions and their logs"""


class LambdaLogError(Exception):
    """Base class for lambdalog errors"""


class FetchError(LambdaLogError):
    """A remote listing or log fetch failed"""

    def __init__(self, what: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {what}: {reason}")
        self.what = what
        self.reason = reason
