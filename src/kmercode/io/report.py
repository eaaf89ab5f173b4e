# Tabular views of the code table and mismatch matrix (for printing)


import pandas as pd

from kmercode.encoding.encoder import Encoder


def words_frame(encoder: Encoder) -> pd.DataFrame:
    """One row per code, in enumeration order."""
    return pd.DataFrame({
        'code': range(encoder.size),
        'word': encoder.words,
    })


def matrix_frame(encoder: Encoder) -> pd.DataFrame:
    """The mismatch matrix, with rows and columns labelled by word."""
    return pd.DataFrame(encoder.matrix, index=list(encoder.words), columns=list(encoder.words))


def render_matrix(encoder: Encoder) -> str:
    """
    Plain rows of space separated counts, one line per code.
    """
    return "\n".join(" ".join(str(v) for v in row) for row in encoder.matrix.tolist())
