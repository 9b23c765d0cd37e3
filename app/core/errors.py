"""Error kinds surfaced by the API.

API errors carry their HTTP status and are rendered as `{"error": message}`
by the handlers registered in `app.main`.
"""


class ApiError(Exception):
    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingParameter(ApiError):
    status_code = 400

    def __init__(self, name: str) -> None:
        super().__init__(f"missing {name}")
        self.name = name


class NotFound(ApiError):
    status_code = 404

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class InvalidArgument(ValueError):
    """A caller broke a precondition of the arrival calculator."""
