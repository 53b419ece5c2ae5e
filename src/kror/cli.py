"""Command-line interface for the kror lexer."""

from __future__ import annotations

import argparse
import io
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kror.errors import LexError

logger = logging.getLogger(__name__)

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    skip_trivia: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="kror",
        description="Tokenize a kror hardware description file",
    )
    p.add_argument("input", help="Input .kror file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument(
        "--skip-trivia",
        action="store_true",
        default=None,
        help="Omit whitespace and comment tokens",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover kror.toml)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "kror.toml"

    if not path.is_file():
        return {}

    logger.debug("loading config from %s", path)
    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    fmt = "text"
    skip_trivia = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r}"
                )
            fmt = cfg_format
        cfg_skip = cfg_output.get("skip_trivia")
        if isinstance(cfg_skip, bool):
            skip_trivia = cfg_skip

    if args.format is not None:
        fmt = args.format
    if args.skip_trivia is not None:
        skip_trivia = args.skip_trivia

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        skip_trivia=skip_trivia,
    )


def lex_file(options: CliOptions) -> str:
    """Read and tokenize a kror file, returning the rendered token listing."""

    from kror.debug import dump_tokens, dump_tokens_json
    from kror.lexer import tokenize, without_trivia

    source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(source, str(options.input_file))
    if options.skip_trivia:
        tokens = list(without_trivia(tokens))

    out = io.StringIO()
    if options.format == "json":
        dump_tokens_json(tokens, file=out)
    else:
        dump_tokens(tokens, file=out)
    logger.info("%s: %d tokens", options.input_file, len(tokens))
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        text = lex_file(options)
        if options.output_file:
            options.output_file.write_text(text, encoding="utf-8")
        else:
            sys.stdout.write(text)
    except LexError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0
