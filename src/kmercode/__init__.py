from kmercode.genome.sequence import Alphabet, SequenceHandler
from kmercode.encoding.code_table import CodeTable, odometer
from kmercode.encoding.mismatch_matrix import MismatchMatrix
from kmercode.encoding.encoder import Encoder
from kmercode.encoding.encoder_registry import EncoderRegistry
from kmercode.exceptions import EncoderError, ConfigurationError, EncodingError, ComparisonError

__version__ = "0.1.0"
