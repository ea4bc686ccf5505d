"""Command line entry point for scripty.

Usage: scripty [-l | -d] [--strict] [-v] [<script_name> [args...]]

Options are only read before the script name; everything after the name is
handed to the script untouched.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, TextIO, Tuple

from scripty import __version__
from scripty.config import resolve_config
from scripty.errors import DirReadError, DuplicateScriptError, RootNotFoundError, ScriptyError
from scripty.listing import render_details, render_names, truncation_warning
from scripty.locator import locate
from scripty.log import set_verbose
from scripty.resolver import build_argv, find_duplicates, find_script, run_interactively
from scripty.scripts import enumerate_scripts


@dataclass(frozen=True)
class Options:
    list_only: bool = False
    detail: bool = False
    strict: bool = False
    verbose: bool = False

    @property
    def listing(self) -> bool:
        return self.list_only or self.detail


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scripty",
        usage="scripty [options | <script_name> [args...]]",
        description="Run scripts from the nearest scripts directory by name.",
    )
    parser.add_argument(
        "-l",
        dest="list_only",
        action="store_true",
        help="Print all available scripts (in machine readable format)",
    )
    parser.add_argument(
        "-d",
        dest="detail",
        action="store_true",
        help="Print all available scripts (with docstring, if available)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when more than one script shares a name",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log discovery steps to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split into leading options and the script command line."""
    options: List[str] = []
    for index, token in enumerate(argv):
        if token == "--":
            return options, list(argv[index + 1:])
        if token == "-" or not token.startswith("-"):
            return options, list(argv[index:])
        options.append(token)
    return options, []


def parse_args(argv: Sequence[str]) -> Tuple[argparse.ArgumentParser, Options, List[str]]:
    option_args, command = split_argv(argv)
    parser = build_parser()
    parsed = parser.parse_args(option_args)
    options = Options(
        list_only=parsed.list_only,
        detail=parsed.detail,
        strict=parsed.strict,
        verbose=parsed.verbose,
    )
    return parser, options, command


def _current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError as exc:
        raise DirReadError(message=f"can't read dir: {exc}", details={"reason": str(exc)}) from exc


def run(
    options: Options,
    command: Sequence[str],
    start_dir: Path,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Locate, enumerate, then list or dispatch. Raises ScriptyError on failure."""
    out = out or sys.stdout
    err = err or sys.stderr
    config = resolve_config(locate(start_dir))
    records = enumerate_scripts(config.scripts_dir)

    if options.listing:
        if options.strict:
            duplicates = find_duplicates(records)
            if duplicates:
                raise DuplicateScriptError(
                    message=f"duplicate script names: {', '.join(sorted(duplicates))}",
                    details={"duplicates": duplicates},
                )
        if options.detail:
            lines, truncated = render_details(records)
        else:
            lines, truncated = render_names(records), None
        for line in lines:
            out.write(line + "\n")
        out.flush()
        if truncated:
            err.write(truncation_warning(truncated) + "\n")
        return 0

    record = find_script(records, command[0], strict=options.strict)
    run_interactively(build_argv(record, command))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser, options, command = parse_args(sys.argv[1:] if argv is None else argv)
    set_verbose(options.verbose)

    # An empty name counts as no name at all
    if (not command or not command[0]) and not options.listing:
        parser.print_help(sys.stdout)
        return 0

    try:
        return run(options, command, _current_dir())
    except RootNotFoundError as err:
        # List mode feeds other tools, so a missing root stays silent
        if not options.listing:
            sys.stderr.write(f"scripty: {err}\n")
        return err.exit_status()
    except ScriptyError as err:
        sys.stderr.write(f"scripty: {err}\n")
        return err.exit_status()


if __name__ == "__main__":
    raise SystemExit(main())
