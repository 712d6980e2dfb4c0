"""config command: show/set/unset project configuration."""

from __future__ import annotations

import argparse
import sys

from toukei.commands import command_config, command_config_path
from toukei.config import (
    CONFIG_SCHEMA,
    save_config,
    set_config_value,
    unset_config_value,
)
from toukei.utils import colorize, print_error


def cmd_config(args: argparse.Namespace) -> None:
    """Handle config subcommands: show, set, unset."""
    action = getattr(args, "config_action", None)
    if action == "set":
        _config_set(args)
    elif action == "unset":
        _config_unset(args)
    else:
        _config_show(args)


def _config_show(args):
    """Print all config keys with current values and descriptions."""
    config = command_config(args)

    print(colorize("\n  Toukei Configuration\n", "bold"))
    for key, schema in CONFIG_SCHEMA.items():
        value = config.get(key, schema.default)
        is_default = value == schema.default
        if isinstance(value, list):
            display = ", ".join(value) if value else "(all)"
        else:
            display = str(value)
        default_tag = colorize(" (default)", "dim") if is_default else ""
        print(f"  {key:<15} {display}{default_tag}")
        print(colorize(f"  {'':15} {schema.description}", "dim"))
    print()


def _save(args, config) -> None:
    try:
        save_config(config, command_config_path(args))
    except OSError as e:
        print_error(f"could not save config: {e}")
        sys.exit(1)


def _config_set(args):
    config = command_config(args)
    key = args.config_key

    try:
        set_config_value(config, key, args.config_value)
    except (KeyError, ValueError) as e:
        print_error(str(e))
        sys.exit(1)

    _save(args, config)
    print(colorize(f"  Set {key} = {config[key]}", "green"))


def _config_unset(args):
    config = command_config(args)
    key = args.config_key

    try:
        unset_config_value(config, key)
    except KeyError as e:
        print_error(str(e))
        sys.exit(1)

    _save(args, config)
    default = CONFIG_SCHEMA[key].default
    print(colorize(f"  Reset {key} to default ({default})", "green"))
