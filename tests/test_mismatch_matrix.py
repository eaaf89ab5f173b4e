"""
Mismatch matrix properties.
"""
import numpy as np
import pytest

from kmercode.encoding.code_table import CodeTable
from kmercode.encoding.mismatch_matrix import MismatchMatrix
from kmercode.genome.sequence import SequenceHandler
from kmercode.exceptions import ComparisonError


def test_single_symbol_matrix():
    m = MismatchMatrix(CodeTable(1))
    expected = np.array([
        [0, 1, 1, 1, 1],
        [1, 0, 1, 1, 1],
        [1, 1, 0, 1, 1],
        [1, 1, 1, 0, 1],
        [1, 1, 1, 1, 1],
    ])
    assert np.array_equal(m.table, expected)


@pytest.mark.parametrize("word_length", [1, 2, 3])
def test_matrix_is_symmetric_and_bounded(word_length):
    m = MismatchMatrix(CodeTable(word_length))
    size = 5 ** word_length
    assert m.shape == (size, size)
    assert np.array_equal(m.table, m.table.T)
    assert m.table.min() >= 0
    assert m.table.max() <= word_length


def test_wildcard_word_mismatches_itself(encoder3):
    code = encoder3.code_of("NNN")
    assert encoder3.mismatch_matrix.lookup(code, code) == 3
    partial = encoder3.code_of("ANG")
    assert encoder3.mismatch_matrix.lookup(partial, partial) == 1


def test_diagonal_zero_only_without_wildcard(encoder2):
    for code, word in enumerate(encoder2.words):
        self_distance = encoder2.matrix[code, code]
        if 'N' in word:
            assert self_distance == word.count('N')
        else:
            assert self_distance == 0


def test_matrix_agrees_with_raw_comparison(encoder2):
    words = encoder2.words
    for i, w1 in enumerate(words):
        for j, w2 in enumerate(words):
            assert encoder2.matrix[i, j] == SequenceHandler.count_mismatches(w1, w2)


def test_matrix_is_read_only(encoder2):
    assert encoder2.matrix.dtype == np.uint8
    with pytest.raises(ValueError):
        encoder2.matrix[0, 0] = 3


def test_indexing_and_lookup(encoder2):
    m = encoder2.mismatch_matrix
    aa, ga = encoder2.code_of("AA"), encoder2.code_of("GA")
    assert m[aa, ga] == 1
    assert m.lookup(aa, ga) == 1
    assert isinstance(m.lookup(aa, ga), int)


def test_code_sequence_queries(encoder2):
    m = encoder2.mismatch_matrix
    c1 = encoder2.encode("ACGTAA")
    c2 = encoder2.encode("ACGAAN")
    assert m.count_mismatches(c1, c2) == 2
    assert m.within_k_mismatches(c1, c2, 2)
    assert not m.within_k_mismatches(c1, c2, 1)


def test_empty_code_sequences(encoder2):
    m = encoder2.mismatch_matrix
    assert m.count_mismatches([], []) == 0
    assert m.within_k_mismatches([], [], 0)


def test_code_sequences_of_different_length_rejected(encoder2):
    m = encoder2.mismatch_matrix
    with pytest.raises(ComparisonError):
        m.count_mismatches([0, 1], [0])
    with pytest.raises(ComparisonError):
        m.within_k_mismatches([0], [0, 1], 5)


@pytest.mark.parametrize("bad", [[-1], [25]])
def test_codes_outside_table_rejected(encoder2, bad):
    m = encoder2.mismatch_matrix
    with pytest.raises(IndexError):
        m.count_mismatches(bad, [0])
    with pytest.raises(IndexError):
        m.within_k_mismatches([0], bad, 5)
    with pytest.raises(IndexError):
        encoder2.count_code_mismatches(bad, bad)


def test_single_symbol_codes(encoder1):
    n = encoder1.code_of("N")
    assert encoder1.count_code_mismatches(encoder1.encode("ACGTN"), encoder1.encode("ACGTN")) == 1
    assert encoder1.matrix[n, n] == 1
    assert encoder1.size == 5
