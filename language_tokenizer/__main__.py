"""
Command line entry point.

    python -m language_tokenizer tokenize "Zoomer slang rocks" --lang english
    python -m language_tokenizer match "like a skibidi rizz" "skibidi" --lang en --mode fuzzy

Exit codes: 0 on success, 1 when `match` finds nothing, 2 on tokenizer errors.
"""

import argparse
import json
import logging
import sys

from language_tokenizer import conf
from language_tokenizer.core.exceptions import TokenizerError
from language_tokenizer.lang import Algorithm
from language_tokenizer.matching import find_all_matches, find_match
from language_tokenizer.models import MatchMode
from language_tokenizer.text.dispatcher import tokenize

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def parse_algorithm(value: str) -> Algorithm:
    try:
        return Algorithm.from_name(value)
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown language '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='language_tokenizer',
        description="Multilingual word tokenization and token sequence matching"
    )
    parser.add_argument("--log-level", default=conf.LOG_LEVEL, help="Logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # tokenize
    tok_p = subparsers.add_parser("tokenize", help="Print the tokens of a text")
    tok_p.add_argument("text", help="Text to tokenize")
    tok_p.add_argument("--lang", type=parse_algorithm, default=Algorithm.ENGLISH,
                       help="Language name or ISO 639-1/639-3 code (default: english)")
    tok_p.add_argument("--keep-stopwords", action="store_true", help="Keep stopwords")
    tok_p.add_argument("--json", dest="as_json", action="store_true", help="Print a JSON array")

    # match
    match_p = subparsers.add_parser("match", help="Find a needle text inside a haystack text")
    match_p.add_argument("haystack", help="Text to search")
    match_p.add_argument("needle", help="Text to find")
    match_p.add_argument("--lang", type=parse_algorithm, default=Algorithm.ENGLISH,
                         help="Language name or ISO 639-1/639-3 code (default: english)")
    match_p.add_argument("--mode", choices=[m.value for m in MatchMode], default=MatchMode.EXACT.value,
                         help="Match mode (default: %(default)s)")
    match_p.add_argument("--ignore-case", action="store_true", help="Compare tokens case-insensitively")
    match_p.add_argument("--all", dest="find_all", action="store_true", help="Report every match")

    return parser


def cmd_tokenize(text: str, algorithm: Algorithm, keep_stopwords: bool, as_json: bool) -> int:
    tokens = tokenize(text, algorithm, keep_stopwords)
    if as_json:
        print(json.dumps(list(tokens), ensure_ascii=False))
    else:
        print(' '.join(tokens))
    return EXIT_OK


def cmd_match(haystack: str, needle: str, algorithm: Algorithm, mode: MatchMode, case_sensitive: bool,
              find_all: bool) -> int:
    haystack_tokens = tokenize(haystack, algorithm)
    needle_tokens = tokenize(needle, algorithm)
    if find_all:
        spans = find_all_matches(haystack_tokens, needle_tokens, mode, case_sensitive)
    else:
        span = find_match(haystack_tokens, needle_tokens, mode, case_sensitive)
        spans = [span] if span is not None else []
    print(json.dumps({
        'algorithm': algorithm.code,
        'matches': [span.to_tuple() for span in spans],
    }))
    return EXIT_OK if spans else EXIT_NO_MATCH


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.command == "tokenize":
            return cmd_tokenize(args.text, args.lang, args.keep_stopwords, args.as_json)
        elif args.command == "match":
            return cmd_match(args.haystack, args.needle, args.lang, MatchMode(args.mode),
                             not args.ignore_case, args.find_all)
        else:
            parser.print_help()
            return EXIT_ERROR
    except TokenizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
