from abc import ABC


class BaseCustomException(Exception, ABC):
    """
    Base class for all custom exceptions.
    """

    def __init__(self, message: str | None = None):
        self.message = message or self.get_default_message()
        super().__init__(self.message)

    def get_default_message(self) -> str:
        """
        Return default error message.

        Returns
        -------
        str
            Default error message
        """
        return "error.unknown"

    def get_status_code(self) -> int:
        """
        Return HTTP status code for exception.

        Returns
        -------
        int
            HTTP status code
        """
        return 500


class UpstreamException(BaseCustomException):
    """Upstream explorer API failure (502)."""

    def get_default_message(self) -> str:
        return "error.upstream.failed"

    def get_status_code(self) -> int:
        return 502


class UpstreamConnectionException(UpstreamException):
    """Upstream could not be reached (connection, DNS, timeout)."""

    def get_default_message(self) -> str:
        return "error.upstream.connection"


class UpstreamStatusException(UpstreamException):
    """
    Upstream answered with a non-success HTTP status.

    Parameters
    ----------
    status : int
        HTTP status code returned by the upstream
    """

    def __init__(self, status: int, message: str | None = None):
        self.status = status
        super().__init__(message or f"HTTP returned code {status}")

    def get_default_message(self) -> str:
        return "error.upstream.status"


class FixtureNotFoundException(UpstreamException):
    """Test-mode fixture file is missing or unreadable."""

    def get_default_message(self) -> str:
        return "error.fixture.not_found"


class DecodeException(BaseCustomException):
    """Upstream payload could not be decoded."""

    def get_default_message(self) -> str:
        return "error.decode.failed"


class BlockNumberParseException(DecodeException):
    """Block number is not a valid hex encoded 64-bit integer."""

    def get_default_message(self) -> str:
        return "error.decode.block_number"


class InvalidBaseUnitsException(DecodeException):
    """Balance is not a plain decimal digit string."""

    def get_default_message(self) -> str:
        return "error.decode.base_units"
