"""Errors raised at the boundary with the external environment runtime."""


class ExternalCallError(Exception):
    """A call into the environment runtime failed.

    Wraps whatever the runtime raised (unknown environment id, missing space
    attribute, value that cannot be extracted, exception inside the
    environment). The original exception is available as ``cause`` and as
    ``__cause__``.
    """

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(f"{operation} failed: {cause!r}")
        self.operation = operation
        self.cause = cause
