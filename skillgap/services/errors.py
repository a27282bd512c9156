"""Engine error types."""


class InvalidInputError(ValueError):
    """Raised when the JD set is not a list or its size is out of bounds."""

    status_code = 400
