"""Command-line interface for wlisp."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from wlisp import CompileResult, try_transpile
from wlisp.lines import split_lines

DEFAULT_SOURCE_SUFFIX = ".wlisp"
DEFAULT_OUTPUT_SUFFIX = ".lisp"
CONFIG_NAME = "wlisp.toml"


class UsageError(Exception):
    """Bad input path or option; reported with exit code 2."""


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_path: Path
    output_file: Path | None
    source_suffix: str
    output_suffix: str
    keep_going: bool
    check: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="wlisp",
        description="An indentation-based Lisp syntax transpiler",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=".",
        help="Input file or directory (default: current directory)",
    )
    p.add_argument("-o", "--output", help="Output file (single input file only)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--keep-going",
        action="store_true",
        default=None,
        help="Report a failing file and continue with the rest",
    )
    p.add_argument("--check", action="store_true", help="Compile without writing output")
    p.add_argument("--debug", action="store_true", help="Dump subtrees to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _suffix(value: object, default: str, key: str) -> str:
    if value is None:
        return default
    suffix = str(value)
    if not suffix.startswith(".") or len(suffix) < 2:
        raise UsageError(f"invalid {key} (expected e.g. '.ext'): {suffix!r}")
    return suffix


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_path = Path(args.input)
    input_dir = input_path if input_path.is_dir() else input_path.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    section = config.get("compile")
    if not isinstance(section, dict):
        section = {}

    source_suffix = _suffix(section.get("source_suffix"), DEFAULT_SOURCE_SUFFIX, "source_suffix")
    output_suffix = _suffix(section.get("output_suffix"), DEFAULT_OUTPUT_SUFFIX, "output_suffix")

    keep_going = bool(section.get("keep_going", False))
    if args.keep_going is not None:
        keep_going = args.keep_going

    output_file = Path(args.output) if args.output else None
    if output_file is not None and input_path.is_dir():
        raise UsageError("--output needs a single input file")

    return CliOptions(
        input_path=input_path,
        output_file=output_file,
        source_suffix=source_suffix,
        output_suffix=output_suffix,
        keep_going=keep_going,
        check=args.check,
        debug=args.debug,
    )


def discover_sources(options: CliOptions) -> list[Path]:
    """Return the source files named by the input path."""
    path = options.input_path
    if path.is_file():
        if path.suffix != options.source_suffix:
            raise UsageError(f"incorrect file extension: {path}")
        return [path]
    if path.is_dir():
        return sorted(path.rglob(f"*{options.source_suffix}"))
    raise UsageError(f"file or directory not found: {path}")


def output_path(source: Path, options: CliOptions) -> Path:
    if options.output_file is not None:
        return options.output_file
    return source.with_suffix(options.output_suffix)


def compile_file(source: Path, options: CliOptions) -> CompileResult:
    """Read and compile one source file, writing its output on success."""
    from wlisp.debug import dump_tree

    text = source.read_text(encoding="utf-8")
    result = try_transpile(split_lines(text), source.name)

    if options.debug and result.document is not None:
        dump_tree(result.document, file=sys.stderr)

    if result.ok and not options.check:
        output_path(source, options).write_text(result.text, encoding="utf-8")
    return result


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
        sources = discover_sources(options)
    except (UsageError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    failed = 0
    for source in sources:
        try:
            result = compile_file(source, options)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            failed += 1
        else:
            if result.error is None:
                print(source)
                continue
            print(result.error.format(), file=sys.stderr)
            failed += 1
        if not options.keep_going:
            break

    return 1 if failed else 0
