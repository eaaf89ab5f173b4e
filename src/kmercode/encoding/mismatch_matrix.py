# All-pairs mismatch lookup table over a CodeTable


import logging

import numpy as np

from kmercode.genome.sequence import Alphabet
from kmercode.encoding.code_table import CodeTable
from kmercode.exceptions import ComparisonError

logger = logging.getLogger(__name__)


class MismatchMatrix:
    """
    Square matrix where cell (i, j) holds the number of mismatching positions
    between the words coded i and j.
    A wildcard position mismatches anything, itself included, so words
    containing N have a non-zero diagonal entry.
    """

    def __init__(self, code_table: CodeTable):
        self.code_table = code_table
        self.word_length = code_table.word_length
        self.table = self._build(code_table.digits)

        logger.debug(
            "Mismatch matrix built: shape %s, %d bytes",
            self.table.shape, self.table.nbytes
        )

    @staticmethod
    def _build(digits: np.ndarray) -> np.ndarray:
        """
        Evaluates the per-position rule for every pair of codes, one position at a time.
        Counts fit in uint8 since a cell never exceeds the word length.
        """
        size, word_length = digits.shape
        table = np.zeros((size, size), dtype=np.uint8)

        for pos in range(word_length):
            column = digits[:, pos]
            wild = column == Alphabet.WILDCARD_INDEX
            # (size, size) mask via broadcasting
            mismatch = (column[:, None] != column[None, :]) | wild[:, None] | wild[None, :]
            table += mismatch

        table.setflags(write=False)
        return table

    def __getitem__(self, item):
        return self.table[item]

    @property
    def shape(self):
        return self.table.shape

    def lookup(self, code1: int, code2: int) -> int:
        return int(self.table[code1, code2])

    def _as_codes(self, codes) -> np.ndarray:
        """Codes as an int64 array; IndexError for anything outside [0, size)."""
        arr = np.asarray(codes, dtype=np.int64)
        if arr.size and (arr.min() < 0 or arr.max() >= self.table.shape[0]):
            raise IndexError(f"Codes must lie in [0, {self.table.shape[0]}).")
        return arr

    def count_mismatches(self, codes1, codes2) -> int:
        """
        Sums the table over aligned code pairs.
        Both code sequences must have the same length and hold codes in [0, size).
        """
        if len(codes1) != len(codes2):
            raise ComparisonError(len(codes1), len(codes2))
        if len(codes1) == 0:
            return 0

        return int(self.table[self._as_codes(codes1), self._as_codes(codes2)].sum(dtype=np.int64))

    def within_k_mismatches(self, codes1, codes2, k: int) -> bool:
        """
        False if the encoded sequences differ in strictly more than k positions.
        Stops at the first word pair that pushes the running count past k.
        Same preconditions as count_mismatches.
        """
        if len(codes1) != len(codes2):
            raise ComparisonError(len(codes1), len(codes2))
        codes1, codes2 = self._as_codes(codes1), self._as_codes(codes2)

        n = 0
        for c1, c2 in zip(codes1, codes2):
            n += int(self.table[c1, c2])
            if n > k:
                return False
        return n <= k
