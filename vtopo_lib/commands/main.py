from __future__ import annotations

import argparse
import logging
from importlib.metadata import entry_points

import vtopo_lib


def main():
    registered_commands = entry_points(group="vtopo_lib.actions")

    parser = argparse.ArgumentParser(prog="vtopo")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version: {vtopo_lib.__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "command",
        choices=registered_commands.names,
    )
    parser.add_argument(
        "args",
        help=argparse.SUPPRESS,
        nargs=argparse.REMAINDER,
    )

    args = argparse.Namespace()
    parser.parse_args(namespace=args)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    main_fn = registered_commands[args.command].load()
    return main_fn(args.args)
