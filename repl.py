import argparse
import logging

from infix_calculator.errors import CalculatorError
from infix_calculator.pipeline import calculate
from infix_calculator.utils import format_number


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(description="Interactive arithmetic calculator")
    arg_parser.add_argument(
        "--skip-whitespace",
        action="store_true",
        help="skip spaces between tokens instead of stopping at the first one",
    )
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="log every pipeline stage")
    args = arg_parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    while True:
        try:
            code = input("> ")
        except EOFError:
            break

        if not code.strip("\r\n"):
            break

        try:
            result = calculate(code, skip_whitespace=args.skip_whitespace)
        except CalculatorError as e:
            print(f"Error: {e}")
            continue

        print(f"= {format_number(result)}")
