"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class FetchFailure(ServiceError):
    """A search fetch that did not produce results."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CoordinatorStateError(ServiceError):
    pass
