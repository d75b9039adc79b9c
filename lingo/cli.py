"""Command-line interface for lingo.

Run with: lingo <command> [options] WORD...
"""
import argparse
import sys

from lingo import __version__
from lingo.core.config import settings
from lingo.core.errors import AppErrorException
from lingo.core.logging import bind_context, clear_context, cli_logger, configure_logging
from lingo.inflector import inflect, tableize
from lingo.languages.registry import get_language, list_languages

log = cli_logger()

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def parse_intent(value: str) -> bool | int | float:
    """Parse the plurality argument of ``inflect``: true/false or a number."""
    lowered = value.lower()
    if lowered in ("true", "yes", "plural"):
        return True
    if lowered in ("false", "no", "singular"):
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected true/false or a number, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lingo",
        description="Inflect English (and registered) words between singular and plural.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lingo pluralize box city leaf      # boxes cities leaves
  lingo singularize mice             # mouse
  lingo inflect child 3              # children
  lingo is-plural sheep              # true
  lingo tableize UserAccount         # user_accounts
  lingo languages                    # en  English
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--lang",
        default=None,
        help=f"Language code (default: {settings.DEFAULT_LANGUAGE})",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Log level (default: %(default)s)")
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.LOG_JSON,
        help="Emit logs as JSON lines",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("pluralize", "Print the plural of each word"),
        ("singularize", "Print the singular of each word"),
        ("is-plural", "Print true/false: is each word plural?"),
        ("is-singular", "Print true/false: is each word singular?"),
        ("tableize", "Underscore and pluralize each camel-cased name"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("words", nargs="+", metavar="WORD")

    sub = commands.add_parser("inflect", help="Put a word in the form a count calls for")
    sub.add_argument("word", metavar="WORD")
    sub.add_argument("plural", metavar="COUNT", type=parse_intent, help="A count, or true/false")

    commands.add_parser("languages", help="List registered languages")
    return parser


def run(args: argparse.Namespace) -> list[str]:
    """Execute a parsed command and return its output lines."""
    if args.command == "languages":
        return [f"{item['code']}\t{item['name']}" for item in list_languages()]
    if args.command == "inflect":
        return [inflect(args.word, args.plural, args.lang)]
    if args.command == "tableize":
        return [tableize(word, args.lang) for word in args.words]

    language = get_language(args.lang)
    if args.command == "pluralize":
        return [language.pluralize(word) for word in args.words]
    if args.command == "singularize":
        return [language.singularize(word) for word in args.words]
    if args.command == "is-plural":
        return [str(language.is_plural(word)).lower() for word in args.words]
    return [str(language.is_singular(word)).lower() for word in args.words]


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, json_logs=args.json_logs)
    bind_context(command=args.command, lang=args.lang)
    log.debug("command_started")

    try:
        lines = run(args)
    except AppErrorException as e:
        log.warning("command_failed", error_code=e.code.name)
        print(f"lingo: {e.error.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    finally:
        clear_context()

    for line in lines:
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
