# The Encoder: turns sequences into word codes and answers mismatch queries


import logging

import numpy as np

from kmercode.genome.sequence import SequenceHandler
from kmercode.encoding.code_table import CodeTable, validate_word_length
from kmercode.encoding.mismatch_matrix import MismatchMatrix
from kmercode.exceptions import EncodingError

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5
# 5^12 cells, one byte each (~244 MB)
DEFAULT_MAX_WORD_LENGTH = 6


class Encoder:
    """
    Holds the code table and the mismatch matrix for one word length.
    Both are built once, in the constructor, and never change afterwards,
    so every query is a plain read and may be called from several threads.

    Example, with word_length = 2:
        encode("ACAA") -> [1, 0]
    """

    def __init__(self, word_length: int = DEFAULT_WORD_LENGTH,
                 max_word_length: int = DEFAULT_MAX_WORD_LENGTH):
        self.word_length = validate_word_length(word_length, max_word_length)
        self.code_table = CodeTable(self.word_length)
        self.mismatch_matrix = MismatchMatrix(self.code_table)
        logger.debug("Encoder ready (word length %d, %d words)", self.word_length, self.size)

    def __repr__(self):
        return f"Encoder(word_length={self.word_length})"

    @property
    def size(self) -> int:
        """Number of distinct words (and codes)."""
        return self.code_table.size

    @property
    def words(self) -> tuple:
        """All words, indexed by their code."""
        return self.code_table.words

    @property
    def matrix(self) -> np.ndarray:
        """Read-only (size x size) mismatch table."""
        return self.mismatch_matrix.table

    # ---- encoding ----

    def encode(self, sequence: str) -> np.ndarray:
        """
        Splits the sequence into consecutive words and converts each to its code.
        The length must be a positive multiple of the word length.
        :param sequence: The string to be converted.
        :return: 1D NumPy array of codes, in sequence order.
        """
        length = len(sequence)
        if length == 0 or length % self.word_length != 0:
            raise EncodingError(length, self.word_length)

        n = length // self.word_length
        codes = np.empty(n, dtype=np.int64)
        for i in range(n):
            word = sequence[i * self.word_length:(i + 1) * self.word_length]
            codes[i] = self.code_table.code_of(word)
        return codes

    def code_of(self, word: str) -> int:
        return self.code_table.code_of(word)

    def decode(self, code: int) -> str:
        """Returns the word for a single code."""
        return self.code_table.word_of(code)

    def decode_sequence(self, codes) -> str:
        """Inverse of encode: joins the words of a code sequence."""
        return "".join(self.code_table.word_of(int(c)) for c in codes)

    # ---- raw sequence queries ----

    @staticmethod
    def count_mismatches(seq1: str, seq2: str) -> int:
        return SequenceHandler.count_mismatches(seq1, seq2)

    @staticmethod
    def within_k_mismatches(seq1: str, seq2: str, k: int) -> bool:
        return SequenceHandler.within_k_mismatches(seq1, seq2, k)

    # ---- encoded sequence queries ----

    def count_code_mismatches(self, codes1, codes2) -> int:
        """Mismatch count between two encoded sequences of equal length."""
        return self.mismatch_matrix.count_mismatches(codes1, codes2)

    def within_k_code_mismatches(self, codes1, codes2, k: int) -> bool:
        """Threshold check between two encoded sequences of equal length."""
        return self.mismatch_matrix.within_k_mismatches(codes1, codes2, k)
