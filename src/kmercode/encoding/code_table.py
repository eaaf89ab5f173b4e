# Word <-> integer code bijection, enumerated like an odometer


import logging
import numbers

import numpy as np

from kmercode.genome.sequence import Alphabet
from kmercode.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def odometer(word_length: int, radix: int = Alphabet.SIZE):
    """
    Yields every digit tuple of the given length in counting order.
    Starts at all zeros; the last digit increments fastest and carries
    to the left on overflow. Stops once all digits have rolled back to zero,
    i.e. after exactly radix ** word_length tuples.
    """
    digits = [0] * word_length
    max_digit = radix - 1

    while True:
        yield tuple(digits)

        # Ripple increment from the right
        for k in range(word_length - 1, -1, -1):
            if digits[k] == max_digit:
                digits[k] = 0
            else:
                digits[k] += 1
                break
        else:
            # Every digit overflowed: full cycle done
            return


def validate_word_length(word_length, max_word_length=None) -> int:
    """Checks that the word length is a positive integer below the ceiling."""
    if isinstance(word_length, bool) or not isinstance(word_length, numbers.Integral):
        raise ConfigurationError(f"Word length must be an integer, got {word_length!r}.")
    if word_length <= 0:
        raise ConfigurationError(f"Word length must be positive, got {word_length}.")
    if max_word_length is None:
        return int(word_length)
    if isinstance(max_word_length, bool) or not isinstance(max_word_length, numbers.Integral) \
            or max_word_length <= 0:
        raise ConfigurationError(
            f"Maximum word length must be a positive integer or None, got {max_word_length!r}."
        )
    if word_length > max_word_length:
        raise ConfigurationError(
            f"Word length {word_length} exceeds the maximum of {max_word_length} "
            f"(the mismatch matrix would hold {Alphabet.SIZE ** (2 * word_length)} cells)."
        )
    return int(word_length)


class CodeTable:
    """
    Assigns every word of `word_length` symbols a unique code in [0, 5^word_length).
    The i-th word produced by the odometer gets code i.
    Both directions of the mapping are kept.
    """

    def __init__(self, word_length: int):
        self.word_length = validate_word_length(word_length)
        self.size = Alphabet.SIZE ** self.word_length

        # digits[code] = alphabet indices of the word, one row per code
        digits = np.empty((self.size, self.word_length), dtype=np.uint8)
        words = []
        for code, state in enumerate(odometer(self.word_length)):
            digits[code] = state
            words.append(Alphabet.to_string(state))

        digits.setflags(write=False)
        self.digits = digits
        self.words = tuple(words)                                   # code -> word
        self.codes = {word: code for code, word in enumerate(words)}  # word -> code

        logger.debug("Code table built: %d words of length %d", self.size, self.word_length)

    def __len__(self):
        return self.size

    def code_of(self, word: str) -> int:
        """Returns the code of a single word. KeyError for words outside the alphabet."""
        return self.codes[word]

    def word_of(self, code: int) -> str:
        return self.words[code]
