"""Failures visible to `exec()` callers under the strict (no fallback) policy."""


class CommandError(Exception):
    """Base class for every dispatch failure."""

    def __init__(self, method: str, message: str):
        super().__init__(message)
        self.method = method
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownMethod(CommandError):
    """Requested method is not present in the command table."""

    def __init__(self, method: str):
        super().__init__(method, f"Unknown operation method: {method}")


class OperationFailed(CommandError):
    """A handler raised. The original exception is kept in `cause`."""

    def __init__(self, method: str, cause: BaseException):
        super().__init__(method, f"Error executing operation {method}: {describe(cause)}")
        self.cause = cause


def describe(error: BaseException) -> str:
    """Message of an exception, or its type name when it carries none."""
    return str(error) or type(error).__name__
