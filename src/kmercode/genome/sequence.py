# Alphabet definition and raw (character level) sequence comparison


import numpy as np

from kmercode.exceptions import ComparisonError


class Alphabet:
    """
    Defines the symbols a word can be made of.
    The order is the enumeration order of the code table.
    """
    # Map: 0:A, 1:C, 2:G, 3:T, 4:N
    SYMBOLS = np.array(['A', 'C', 'G', 'T', 'N'])
    WILDCARD = 'N'
    SIZE = len(SYMBOLS)
    WILDCARD_INDEX = 4

    @classmethod
    def to_string(cls, digits) -> str:
        """Converts an array of alphabet indices back into a DNA string."""
        return "".join(cls.SYMBOLS[np.asarray(digits, dtype=np.intp)])


class SequenceHandler:
    """
    Mismatch counting directly on symbol strings.
    A position mismatches when either symbol is the wildcard or the symbols differ.
    Comparison is case sensitive.
    """

    @staticmethod
    def is_mismatch(a: str, b: str) -> bool:
        return a == Alphabet.WILDCARD or b == Alphabet.WILDCARD or a != b

    @staticmethod
    def count_mismatches(seq1: str, seq2: str) -> int:
        """
        Returns the number of mismatching positions between two sequences.
        Example: count_mismatches("AA", "GA") -> 1
        """
        if len(seq1) != len(seq2):
            raise ComparisonError(len(seq1), len(seq2))

        a = np.array(list(seq1), dtype='U1')
        b = np.array(list(seq2), dtype='U1')
        mismatch = (a != b) | (a == Alphabet.WILDCARD) | (b == Alphabet.WILDCARD)
        return int(np.count_nonzero(mismatch))

    @staticmethod
    def within_k_mismatches(seq1: str, seq2: str, k: int) -> bool:
        """
        False if the two sequences differ in strictly more than k positions.
        Stops scanning as soon as the threshold is exceeded.
        Example: within_k_mismatches("AA", "AG", 1) -> True
                 within_k_mismatches("AA", "AG", 0) -> False
        """
        if len(seq1) != len(seq2):
            raise ComparisonError(len(seq1), len(seq2))

        n = 0
        for a, b in zip(seq1, seq2):
            if SequenceHandler.is_mismatch(a, b):
                n += 1
                if n > k:
                    return False
        # Covers negative k on identical sequences
        return n <= k
