from hypview.exceptions import HypViewError


class ApiRequestError(HypViewError):
    """Base class for exceptions related to the launcher API."""

    pass


class TransportError(ApiRequestError):
    """The request to the launcher API failed."""

    pass


class DecodeError(ApiRequestError):
    """The launcher API response couldn't be turned into a document."""

    pass


class MalformedResponseError(DecodeError):
    """The response is not JSON or doesn't have the expected shape."""

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details


class ApiError(DecodeError):
    """The launcher API answered with a non-zero retcode."""

    def __init__(self, message: str, retcode: int | None = None):
        super().__init__(message)
        self.message = message
        self.retcode = retcode

    def __str__(self) -> str:
        return f"API returned an error: {self.message}"
