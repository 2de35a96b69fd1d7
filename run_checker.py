#!/usr/bin/env python3
# run_checker.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Command-line interface for formula parsing and satisfiability checking

import sys
import time
import argparse
from pathlib import Path
from typing import Dict, List, Optional

from formula import dump_tree
from formula.exceptions import EvaluationError, ParseError
from formula.symbols import Literal
from logic import Formula
from utils.logger import configure_logging, get_logger


_TRUE_WORDS = {"1", "t", "true", "yes"}
_FALSE_WORDS = {"0", "f", "false", "no"}


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")
    return content


def parse_assignment(text: str, formula: Formula) -> Dict[Literal, bool]:
    """Parse ``A=1,B=false`` into an assignment over the formula's literals.

    Names the formula does not mention are rejected, so typos surface
    instead of being ignored.

    Raises:
        ValueError: Malformed pair, unknown literal or unrecognized value
    """
    assignment: Dict[Literal, bool] = {}
    for pair in filter(None, (part.strip() for part in text.split(","))):
        name, sep, raw = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected NAME=VALUE, got '{pair}'")
        try:
            literal = formula.literal(name.strip())
        except KeyError:
            raise ValueError(f"Formula has no literal named '{name.strip()}'") from None

        value = raw.strip().lower()
        if value in _TRUE_WORDS:
            assignment[literal] = True
        elif value in _FALSE_WORDS:
            assignment[literal] = False
        else:
            raise ValueError(f"Unrecognized truth value '{raw.strip()}' for {name}")
    return assignment


def format_assignment(assignment: Dict[Literal, bool]) -> str:
    return ", ".join(f"{lit}={'T' if v else 'F'}" for lit, v in assignment.items())


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Propsat propositional formula checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=r"""
Examples:
  python run_checker.py "A /\ ~A"
  python run_checker.py "(A -> B) <-> (~B -> ~A)" --tree
  python run_checker.py -f formula.prop --assign A=1,B=0
  python run_checker.py "A \/ B" --models

Syntax:
  ~ negation, /\ and, \/ or, -> implies, <-> iff, ( ) grouping.
  Unbracketed chains group to the left: A \/ B /\ C is (A \/ B) /\ C.
        """,
    )

    parser.add_argument("formula", nargs="?", help="Formula text")

    parser.add_argument(
        "-f", "--file", type=Path, help="Read the formula from a file instead"
    )

    parser.add_argument(
        "--assign", metavar="A=1,B=0", help="Evaluate under this assignment"
    )

    parser.add_argument(
        "--tree", action="store_true", help="Print the parsed tree"
    )

    parser.add_argument(
        "--models", action="store_true", help="List every satisfying assignment"
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report errors"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --quiet)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the checker.

    Returns:
        Exit code: 0 success, 1 usage or file error, 2 parse error,
        3 evaluation error, 4 interrupted
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Results are reported at INFO
    configure_logging(verbose=not args.quiet, debug=args.debug)
    logger = get_logger()

    try:
        if args.file is not None:
            text = read_formula_file(args.file)
        elif args.formula is not None:
            text = args.formula
        else:
            logger.error("No formula given (pass FORMULA or --file)")
            return 1

        start = time.perf_counter()
        formula = Formula.from_text(text)
        logger.info(f"📋 Formula: {formula}")
        logger.info(f"   Literals: {', '.join(l.name for l in formula.literals)}")

        if args.tree:
            logger.info(dump_tree(formula.root))

        if args.assign is not None:
            assignment = parse_assignment(args.assign, formula)
            value = formula.evaluate(assignment)
            logger.info(f"   Under {format_assignment(assignment)}: {value}")

        verdict = formula.verdict()
        logger.verdict(str(formula), verdict.satisfiable)
        logger.info(f"   Classification: {verdict}")

        if args.models:
            for model in formula.models():
                logger.info(f"   model: {format_assignment(model)}")

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"   Runtime: {elapsed_ms:.2f}ms")
        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except EvaluationError as e:
        logger.error(f"Evaluation error: {e}")
        return 3

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Input error: {e}")
        return 1

    except KeyboardInterrupt:
        logger.error("Checking interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
