"""Command-line host: `python -m nli FILE`.

Evaluates the program in FILE and prints the raw structural dump of the
result, a blank line, then its pretty-printed form.
"""

import argparse
import logging
import sys

from nli.config import get_log_level
from nli.debug_utils.dump import dump, dump_tokens, dump_tree
from nli.errors import NliError
from nli.interpreter import Interpreter
from nli.printer import pretty

logger = logging.getLogger("nli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nli", description="Evaluate an NLI program.")
    parser.add_argument("file", help="program to evaluate")
    parser.add_argument("--tokens", action="store_true", help="print the lexer output first")
    parser.add_argument("--tree", action="store_true", help="print the parsed expression tree first")
    parser.add_argument("--json-names", action="store_true", help="bind true, false and null")
    parser.add_argument("--log-level", default=None, help="logging level (default: $NLI_LOG_LEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=(args.log_level or get_log_level()).upper(), format="%(name)s: %(message)s")

    interp = Interpreter(json_compat=args.json_names)
    try:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()
        if args.tokens:
            print("TOKENS")
            print(dump_tokens(interp.lex(source)))
        if args.tree:
            print("TREE")
            print(dump_tree(interp.parse(source)))
        result = interp.eval(source)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except NliError as e:
        logger.debug("evaluation failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(dump(result))
    print()
    print(pretty(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
