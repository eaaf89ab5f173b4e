"""
Pytest configuration for kmercode tests.
"""
import sys
import os
import pytest

# Add src directory to Python path so tests can import kmercode without installing it
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "../src"))
sys.path.insert(0, src_path)


# ==============================================================================
# Encoder Fixtures
# ==============================================================================

@pytest.fixture(scope="session")
def encoder1():
    """Single-symbol words: 5 codes."""
    from kmercode.encoding.encoder import Encoder
    return Encoder(word_length=1)


@pytest.fixture(scope="session")
def encoder2():
    """Word length 2: 25 codes, 625 matrix cells."""
    from kmercode.encoding.encoder import Encoder
    return Encoder(word_length=2)


@pytest.fixture(scope="session")
def encoder3():
    """Word length 3: 125 codes."""
    from kmercode.encoding.encoder import Encoder
    return Encoder(word_length=3)
