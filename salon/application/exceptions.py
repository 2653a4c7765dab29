class SalonApiError(RuntimeError):
    """Raised when a backend call fails; callers report it as a transient notice."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(SalonApiError):
    """Raised when the request never got a response (connection errors, timeouts)."""
    pass


class NotFoundError(SalonApiError):
    """Raised when the backend answers 404 for the requested record."""
    pass


class ServerError(SalonApiError):
    """Raised for any other 4xx/5xx answer from the backend."""
    pass


class AdminAccessDenied(PermissionError):
    """Raised when an admin use case is requested without an authenticated session."""
    pass
