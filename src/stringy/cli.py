"""
Stringy Command-Line Interface.

Exposes the case-style converters, slug/ASCII folding, truncation, padding
and analysis operations as subcommands. Text comes from the positional
argument, or from stdin when it is omitted.

Usage:
    stringy camelize "string_with1number"        # stringWith1Number
    stringy dasherize "TestDCase"                # test-d-case
    stringy slugify "Using strings like fòô bàř"
    stringy truncate "Test foo bar" -n 11 --suffix ...
    stringy safe-truncate "Test foo bar" -n 11
    stringy pad "foo bar" -n 9 --pad-str "_*" --side left
    stringy between "{foo} and {bar}" --start { --end } --offset 1
    stringy common "foo bar" "boo far"
    echo "fòô bàř" | stringy length
    stringy info "fòô bàř" --json
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Callable, Optional

from stringy import __version__
from stringy.config import ENV_NO_COLOR, Settings
from stringy.core.padding import PadSide
from stringy.utils.errors import StringyError
from stringy.value import Stringy

logger = logging.getLogger(__name__)


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"

    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    if not sys.stdout.isatty() or os.environ.get(ENV_NO_COLOR):
        Colors.disable()


# Initialize on module load
_init_colors()


def _add_text_arguments(parser: argparse.ArgumentParser, text_required: bool = False) -> None:
    """Arguments shared by every text-processing subcommand."""
    parser.add_argument(
        "text",
        nargs=None if text_required else "?",
        default=None,
        help="Input text (default: read from stdin)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the result as JSON",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding tag for the input (default: $STRINGY_ENCODING or UTF-8)",
    )


def create_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    settings = settings or Settings.from_env()

    parser = argparse.ArgumentParser(
        prog="stringy",
        description="Stringy - Unicode-aware string transformations",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Case-style converters without options
    for name, help_text in (
        ("camelize", "Convert to camelCase"),
        ("upper-camelize", "Convert to UpperCamelCase"),
        ("dasherize", "Convert to dash-case"),
        ("underscored", "Convert to underscore_case"),
        ("snakeize", "Convert to snake_case, digits as separate words"),
    ):
        _add_text_arguments(subparsers.add_parser(name, help=help_text))

    delimit_parser = subparsers.add_parser("delimit", help="Lowercase and join words with a delimiter")
    _add_text_arguments(delimit_parser)
    delimit_parser.add_argument(
        "-d",
        "--delimiter",
        required=True,
        help="Delimiter placed between words",
    )

    titleize_parser = subparsers.add_parser("titleize", help="Capitalize each word")
    _add_text_arguments(titleize_parser)
    titleize_parser.add_argument(
        "--ignore",
        nargs="*",
        default=None,
        help="Words to leave unchanged",
    )

    # Transliteration
    slugify_parser = subparsers.add_parser("slugify", help="Convert to a URL slug")
    _add_text_arguments(slugify_parser)
    slugify_parser.add_argument(
        "-s",
        "--separator",
        default="-",
        help="Word separator (default: -)",
    )
    slugify_parser.add_argument(
        "--language",
        default=settings.language,
        help=f"Transliteration language (default: {settings.language})",
    )
    slugify_parser.add_argument(
        "--keep-case",
        action="store_true",
        help="Do not lowercase the slug",
    )

    ascii_parser = subparsers.add_parser("to-ascii", help="Fold to ASCII")
    _add_text_arguments(ascii_parser)
    ascii_parser.add_argument(
        "--language",
        default=settings.language,
        help=f"Transliteration language (default: {settings.language})",
    )
    ascii_parser.add_argument(
        "--keep-unsupported",
        action="store_true",
        help="Keep characters that have no ASCII form",
    )

    # Truncation
    for name, help_text in (
        ("truncate", "Cut to a length, suffix included"),
        ("safe-truncate", "Cut to a length without splitting words"),
    ):
        truncate_parser = subparsers.add_parser(name, help=help_text)
        _add_text_arguments(truncate_parser)
        truncate_parser.add_argument(
            "-n",
            "--length",
            type=int,
            required=True,
            help="Maximum length in codepoints",
        )
        truncate_parser.add_argument(
            "--suffix",
            default="",
            help="Text appended when truncation happens",
        )

    pad_parser = subparsers.add_parser("pad", help="Pad to a length")
    _add_text_arguments(pad_parser)
    pad_parser.add_argument(
        "-n",
        "--length",
        type=int,
        required=True,
        help="Target length in codepoints",
    )
    pad_parser.add_argument(
        "--pad-str",
        default=" ",
        help="Padding text, repeated as needed (default: space)",
    )
    pad_parser.add_argument(
        "--side",
        default=PadSide.RIGHT.value,
        help="Where to pad: left, right or both (default: right)",
    )

    between_parser = subparsers.add_parser("between", help="Extract text between two delimiters")
    _add_text_arguments(between_parser)
    between_parser.add_argument("--start", required=True, help="Opening delimiter")
    between_parser.add_argument("--end", required=True, help="Closing delimiter")
    between_parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Codepoint offset to start searching from",
    )

    common_parser = subparsers.add_parser("common", help="Longest common prefix, suffix or substring")
    _add_text_arguments(common_parser, text_required=True)
    common_parser.add_argument("other", help="Text to compare against")
    common_parser.add_argument(
        "--kind",
        choices=["prefix", "suffix", "substring"],
        default="substring",
        help="What to look for (default: substring)",
    )

    length_parser = subparsers.add_parser("length", help="Count codepoints")
    _add_text_arguments(length_parser)

    info_parser = subparsers.add_parser("info", help="Show classification details for a text")
    _add_text_arguments(info_parser)

    return parser


def _read_text(args: argparse.Namespace, settings: Settings) -> Stringy:
    """Build the input value from the argument or stdin."""
    encoding = args.encoding or settings.encoding
    if args.text is not None:
        return Stringy(args.text, encoding)

    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is not None:
        raw = buffer.read()
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        return Stringy.from_bytes(raw, encoding)
    data = sys.stdin.read()
    return Stringy(data.removesuffix("\n"), encoding)


def _emit(args: argparse.Namespace, source: Stringy, result: Any) -> None:
    if args.json:
        payload = {
            "command": args.command,
            "input": str(source),
            "result": str(result) if isinstance(result, Stringy) else result,
        }
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(result)


def _run(args: argparse.Namespace, settings: Settings, operation: Callable[[Stringy], Any]) -> int:
    """Read input, apply one operation and print the outcome."""
    try:
        source = _read_text(args, settings)
        result = operation(source)
        _emit(args, source, result)
        return 0

    except StringyError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


def cmd_camelize(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, Stringy.camelize)


def cmd_upper_camelize(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, Stringy.upper_camelize)


def cmd_dasherize(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, Stringy.dasherize)


def cmd_underscored(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, Stringy.underscored)


def cmd_snakeize(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, Stringy.snakeize)


def cmd_delimit(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, lambda s: s.delimit(args.delimiter))


def cmd_titleize(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, lambda s: s.titleize(args.ignore))


def cmd_slugify(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the slugify command."""
    return _run(
        args,
        settings,
        lambda s: s.slugify(args.separator, args.language, lowercase=not args.keep_case),
    )


def cmd_to_ascii(args: argparse.Namespace, settings: Settings) -> int:
    return _run(
        args,
        settings,
        lambda s: s.to_ascii(args.language, remove_unsupported=not args.keep_unsupported),
    )


def cmd_truncate(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, lambda s: s.truncate(args.length, args.suffix))


def cmd_safe_truncate(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, lambda s: s.safe_truncate(args.length, args.suffix))


def cmd_pad(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the pad command; an unknown side is reported as an error."""
    return _run(args, settings, lambda s: s.pad(args.length, args.pad_str, args.side))


def cmd_between(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, lambda s: s.between(args.start, args.end, args.offset))


def cmd_common(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the common command - longest common prefix/suffix/substring."""
    operations = {
        "prefix": Stringy.longest_common_prefix,
        "suffix": Stringy.longest_common_suffix,
        "substring": Stringy.longest_common_substring,
    }
    operation = operations[args.kind]
    return _run(args, settings, lambda s: operation(s, args.other))


def cmd_length(args: argparse.Namespace, settings: Settings) -> int:
    return _run(args, settings, Stringy.length)


def _describe(value: Stringy) -> dict[str, Any]:
    return {
        "length": value.length(),
        "encoding": value.encoding,
        "is_alpha": value.is_alpha(),
        "is_alphanumeric": value.is_alphanumeric(),
        "is_blank": value.is_blank(),
        "is_hexadecimal": value.is_hexadecimal(),
        "is_lower_case": value.is_lower_case(),
        "is_upper_case": value.is_upper_case(),
        "has_lower_case": value.has_lower_case(),
        "has_upper_case": value.has_upper_case(),
        "is_json": value.is_json(),
        "is_base64": value.is_base64(),
        "is_html": value.is_html(),
        "to_boolean": value.to_boolean(),
    }


def cmd_info(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the info command - show classification details."""
    try:
        value = _read_text(args, settings)
    except StringyError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    details = _describe(value)
    if args.json:
        print(json.dumps({"input": str(value), **details}, ensure_ascii=False))
        return 0

    print(f"{Colors.BOLD}{value!r}{Colors.RESET}")
    for key, detail in details.items():
        if isinstance(detail, bool):
            color = Colors.GREEN if detail else Colors.GRAY
            print(f"  {Colors.CYAN}{key + ':':<18}{Colors.RESET}{color}{detail}{Colors.RESET}")
        else:
            print(f"  {Colors.CYAN}{key + ':':<18}{Colors.RESET}{detail}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    try:
        settings = Settings.from_env()
    except StringyError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    if not settings.color:
        Colors.disable()

    parser = create_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "camelize": cmd_camelize,
        "upper-camelize": cmd_upper_camelize,
        "dasherize": cmd_dasherize,
        "underscored": cmd_underscored,
        "snakeize": cmd_snakeize,
        "delimit": cmd_delimit,
        "titleize": cmd_titleize,
        "slugify": cmd_slugify,
        "to-ascii": cmd_to_ascii,
        "truncate": cmd_truncate,
        "safe-truncate": cmd_safe_truncate,
        "pad": cmd_pad,
        "between": cmd_between,
        "common": cmd_common,
        "length": cmd_length,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler:
        logger.debug("Running %s", args.command)
        return handler(args, settings)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
