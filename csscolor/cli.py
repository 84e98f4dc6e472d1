"""Command line tool for resolving CSS colors."""
import argparse
from collections.abc import Iterator
import logging
import sys

from . import Context, ColorError, parse_color, to_hex, to_string


def create_parser() -> argparse.ArgumentParser:
    """Create a command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='python -m csscolor',
        description="""
            Resolve CSS color values to packed 32-bit RGBA colors. For every
            color, print the packed value in hexadecimal, the rgb() or rgba()
            serialization, and the hashed hexadecimal serialization.
        """,
        epilog="""
            Colors may use hashed hexadecimal notation, CSS color names, or the
            rgb(), rgba(), hsl(), hsla(), lab(), oklab(), oklch(), and color()
            functions. Remember to quote colors for the shell.
        """,
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="log less; may be repeated",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="log more; -v shows values that fall back to defaults",
    )
    parser.add_argument(
        "-i", "--input",
        help="also read newline-separated colors from the named file",
    )
    parser.add_argument(
        "colors",
        nargs="*",
        help="the CSS colors to resolve",
    )
    return parser


def configure_logging(verbose: int, quiet: int) -> None:
    log_levels = (logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG)
    log_level_idx = log_levels.index(logging.INFO) + verbose - quiet
    logging.basicConfig(
        level=log_levels[max(0, min(len(log_levels) - 1, log_level_idx))],
        format="%(levelname)s: %(name)s: %(message)s",
    )


def ingest(file: str) -> Iterator[str]:
    """
    Ingest the file with colors. Empty lines and lines starting with ``//`` are
    skipped; a leading ``#`` is part of the color.
    """
    with open(file, mode="r", encoding="utf8") as handle:
        for line in handle:
            line = line.strip()
            if line and not line.startswith("//"):
                yield line


def main(argv: None | list[str] = None) -> int:
    options = create_parser().parse_args(argv)
    configure_logging(options.verbose, options.quiet)

    texts = list(options.colors)
    if options.input:
        texts.extend(ingest(options.input))

    context = Context()
    status = 0
    for text in texts:
        try:
            color = parse_color(text, context)
        except ColorError as x:
            logging.error("%s", x)
            status = 1
            continue

        print(f"{text:<32} 0x{color:08x}  {to_string(color):<28} {to_hex(color)}")

    return status


if __name__ == "__main__":
    sys.exit(main())
