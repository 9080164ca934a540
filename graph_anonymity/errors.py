class AnonymizationError(Exception):
    """Raised when a graph could not be anonymised."""


class NotRealizableError(AnonymizationError):
    """An additional-degree vector that cannot be realised on the graph."""

    def __init__(self, failure):
        super().__init__(failure.cause)
        self.failure = failure
