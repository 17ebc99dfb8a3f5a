"""CLI entry point: run `precisionlint file.rs` or `python -m precisionlint file.rs`."""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .compiler.driver import LintDriver
    from .compiler.fixes import apply_suggestions
    from .utils.config import NO_COLOR_ENV_VAR
    from .utils.io_utils import read_source_file, write_source_file

    parser = argparse.ArgumentParser(
        prog="precisionlint",
        description="Flag float literals with more digits than their type can store.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Source files to lint")
    parser.add_argument("--fix", action="store_true", help="Rewrite files with the suggested literals")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if args.no_color:
        os.environ[NO_COLOR_ENV_VAR] = "1"

    driver = LintDriver()
    failed = False

    for path in args.files:
        if not path.is_file():
            sys.stderr.write(f"precisionlint: error: not a file: {path}\n")
            failed = True
            continue
        try:
            source = read_source_file(path)
        except (OSError, UnicodeDecodeError) as e:
            sys.stderr.write(f"precisionlint: error: could not read {path}: {e}\n")
            failed = True
            continue

        result = driver.lint(source, str(path))
        if result.diagnostics:
            sys.stderr.write(result.format() + "\n")
        if not result.success:
            failed = True
            continue

        if args.fix and result.has_warnings():
            write_source_file(path, apply_suggestions(source, result.warnings))
            sys.stderr.write(f"precisionlint: fixed {len(result.warnings)} literal(s) in {path}\n")
        elif result.has_warnings():
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
