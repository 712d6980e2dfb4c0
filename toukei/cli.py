"""CLI entry point: argparse, subcommand routing, registry start-up."""

from __future__ import annotations

import argparse
import logging
import sys

from toukei import __version__
from toukei.languages import RegistryBuildError, ensure_ready
from toukei.utils import print_error

logger = logging.getLogger(__name__)

USAGE_EXAMPLES = """
examples:
  toukei langs                    List every language tag and its family
  toukei langs --json             Same, as JSON
  toukei show Hpp                 Show the rules a tag resolves to
  toukei config set types Rust    Limit `langs` to selected tags
  toukei config unset types       Back to all tags
"""


def _add_config_parser(sub) -> None:
    p_config = sub.add_parser("config", help="Show/set/unset project configuration")
    config_sub = p_config.add_subparsers(dest="config_action")
    config_sub.add_parser("show", help="Show all config values")
    p_set = config_sub.add_parser("set", help="Set a config value")
    p_set.add_argument("config_key", type=str, help="Config key name")
    p_set.add_argument("config_value", type=str, help="Value to set")
    p_unset = config_sub.add_parser("unset", help="Reset a config key to default")
    p_unset.add_argument("config_key", type=str, help="Config key name")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toukei",
        description="Language definitions for source statistics.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=str, default=None, help="Path to config.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_langs = sub.add_parser("langs", help="List supported language tags")
    p_langs.add_argument("--json", action="store_true", help="Output JSON")

    p_show = sub.add_parser("show", help="Show the definition a tag resolves to")
    p_show.add_argument("tag", type=str, help="Language tag (case-insensitive)")
    p_show.add_argument("--json", action="store_true", help="Output JSON")

    _add_config_parser(sub)
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        ensure_ready()
    except RegistryBuildError as exc:
        print_error(f"language registry failed verification: {exc}")
        sys.exit(1)

    # Lazy-load command handlers
    from toukei.commands.config_cmd import cmd_config
    from toukei.commands.langs import cmd_langs
    from toukei.commands.show import cmd_show

    commands = {
        "langs": cmd_langs,
        "show": cmd_show,
        "config": cmd_config,
    }

    try:
        commands[args.command](args)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)


if __name__ == "__main__":
    main()
