"""
Custom exception types for the Dribbble API client.

Only client-side precondition failures are represented here.  Errors
raised by the HTTP transport (connection failures, timeouts, non-2xx
responses) are the ``requests`` exceptions themselves and reach the
caller unchanged.
"""


class DribbbleError(Exception):
    """Base exception for all Dribbble client errors.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    code : int
        HTTP-style status code describing the failure.
    """

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class DribbbleUnauthorizedError(DribbbleError):
    """Raised when a protected endpoint is called before a token is set."""

    def __init__(self, message: str = "Need authorization.", code: int = 403) -> None:
        super().__init__(message, code)
