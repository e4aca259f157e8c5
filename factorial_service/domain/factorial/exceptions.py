"""Domain errors for factorial computation."""


class InvalidFactorialInputError(ValueError):
    """Raised when an input number is not an unsigned integer."""

    def __init__(self, input_number: int):
        self.input_number = input_number
        super().__init__(
            f"Factorial input must be a non-negative integer, got {input_number}"
        )
