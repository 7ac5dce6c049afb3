class ForvoValidationError(ValueError):
    """Raised when call parameters are rejected before any request is sent."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
