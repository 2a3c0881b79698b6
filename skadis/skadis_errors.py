class InvalidParameterError(ValueError):
    """Raised when a board parameter is non-finite or out of its allowed range."""


class EmitterError(RuntimeError):
    """Raised when the drawing emitter fails to build or write the output file."""
