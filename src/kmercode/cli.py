import argparse
import logging
import sys

import yaml

from kmercode.encoding.encoder_registry import EncoderRegistry
from kmercode.exceptions import EncoderError
from kmercode.io.report import words_frame, matrix_frame, render_matrix
from kmercode.genome.sequence import Alphabet
from kmercode.color import fg

logger = logging.getLogger(__name__)


def load_config(path):
    """Reads a YAML configuration file. An empty file gives an empty dict."""
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def run_from_config(conf, args):
    """
    Builds the encoder and runs the requested action.
    Without --encode / --compare the word list and mismatch matrix are printed.
    """
    encoder = EncoderRegistry.get(
        conf,
        word_length=args.word_length,
        max_word_length=args.max_word_length
    )

    logger.debug("Built %r", encoder)

    if args.encode:
        codes = encoder.encode(args.encode)
        print(" ".join(str(c) for c in codes))
        return True

    if args.compare:
        seq1, seq2 = args.compare
        print(encoder.count_mismatches(seq1, seq2))
        if args.k is not None:
            # Compare through the lookup table when both sequences split into words
            try:
                within = encoder.within_k_code_mismatches(encoder.encode(seq1), encoder.encode(seq2), args.k)
            except (EncoderError, KeyError):
                within = encoder.within_k_mismatches(seq1, seq2, args.k)
            print(within)
        return True

    if args.labels:
        print(words_frame(encoder).to_string(index=False))
        print(matrix_frame(encoder).to_string())
    else:
        for word in encoder.words:
            print(word)
        print(render_matrix(encoder))
    return True


def build_parser():
    parser = argparse.ArgumentParser(description="KMERCODE: word encoder and mismatch lookup table")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("-w", "--word-length", type=int, default=None, help="Length of the words")
    parser.add_argument("--max-word-length", type=int, default=None,
                        help="Refuse word lengths above this value")
    parser.add_argument("--encode", metavar="SEQ", help="Print the codes of a sequence")
    parser.add_argument("--compare", nargs=2, metavar=("SEQ1", "SEQ2"),
                        help="Print the number of mismatches between two sequences")
    parser.add_argument("-k", type=int, default=None, help="Mismatch threshold for --compare")
    parser.add_argument("--labels", action="store_true", help="Label the table with words")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    """
    CLI Entry point
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    conf = {}
    if args.config:
        try:
            conf = load_config(args.config)
        except (OSError, yaml.YAMLError) as e:
            print(fg.RED, f"Error: Could not read config file. {e}", fg.RESET)
            sys.exit(1)

    try:
        run_from_config(conf, args)
    except EncoderError as e:
        print(fg.RED, f"Error: {e}", fg.RESET)
        sys.exit(1)
    except KeyError as e:
        print(fg.RED, f"Error: Unknown word {e}, only {''.join(Alphabet.SYMBOLS)} are allowed.", fg.RESET)
        sys.exit(1)


if __name__ == "__main__":
    main()
