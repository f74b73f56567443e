import argparse
import logging
import sys

from .display import DEFAULT_WIDTH
from .executor import Executor
from .repl import repl_loop, run_script


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="memdb", description="In-memory SQL-like table store")
    parser.add_argument("-f", "--file", help="run the statements in FILE instead of starting the REPL")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="column width for query output")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    exe = Executor()
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            failures = run_script(exe, f.read(), width=args.width)
        return 1 if failures else 0
    repl_loop(exe, width=args.width)
    return 0


if __name__ == "__main__":
    sys.exit(main())
