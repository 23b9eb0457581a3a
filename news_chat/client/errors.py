"""Failures raised by the news service client."""


class NewsApiError(Exception):
    """Base class for news service failures."""

    pass


class ConnectivityError(NewsApiError):
    """Raised when a session cannot be obtained from the service."""

    pass


class ChatRequestError(NewsApiError):
    """Raised when a single chat turn fails.

    Attributes:
        server_message: The ``error`` field of the response body, if any.
        status_code: HTTP status of the failed response, if one arrived.
    """

    def __init__(
        self,
        message: str,
        server_message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.server_message = server_message
        self.status_code = status_code


class AdvisoryCleanupError(NewsApiError):
    """Raised when relinquishing a session fails. Never shown to the user."""

    pass
