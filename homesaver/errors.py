class InvalidInputError(ValueError):
    """Untrusted input failed validation before reaching a calculator."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
