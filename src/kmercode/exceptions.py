# Errors raised by the encoder and its queries


class EncoderError(ValueError):
    """Base class for every error raised by kmercode."""


class ConfigurationError(EncoderError):
    """Invalid word length (or other setting) at construction time."""


class EncodingError(EncoderError):
    """
    Raised when a sequence cannot be split into whole words.
    Keeps the offending length and the configured word length.
    """

    def __init__(self, length: int, word_length: int):
        self.length = length
        self.word_length = word_length
        super().__init__(
            f"Length of input string ({length}) not divisible with word length ({word_length})."
        )


class ComparisonError(EncoderError):
    """Raised when two sequences of different length are compared."""

    def __init__(self, first_length: int, second_length: int):
        self.first_length = first_length
        self.second_length = second_length
        super().__init__(
            f"Cannot compare sequences of different length ({first_length} vs {second_length})."
        )
