"""Command-line interface for caconfig.

Mirrors the declarative resource surface one-to-one:
- get: Print the current settings of the active authority
- test: Compare a desired-state file against the registry (exit 2 on drift)
- set: Write the differing settings and advise a service restart
"""
from __future__ import annotations

import argparse
from pathlib import Path

from caconfig.command import Command, GetCommand, SetCommand, TestCommand
from caconfig.config.desired import DesiredState
from caconfig.config.engine import EngineConfig
from caconfig.config.schema import Schema
from caconfig.console import logger
from caconfig.engine import CertificationAuthoritySettings
from caconfig.store import AdvisoryRestarter, JsonFileStore


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_DRIFT = 2


class _Args(argparse.Namespace):
    """Typed namespace for CLI arguments."""

    command: str | None = None
    desired: Path | None = None
    store: Path = Path("registry.json")
    schema: Path | None = None


class CLI(argparse.ArgumentParser):
    """Intent-first command-line interface: one subcommand per operation."""

    def __init__(self) -> None:
        """Set up CLI with get/test/set subcommands."""
        super().__init__(
            prog="caconfig",
            description="caconfig - declarative certificate authority settings.",
        )

        _ = self.add_argument(
            "--version",
            action="version",
            version="%(prog)s 0.1.0",
            help="Show the version and exit.",
        )

        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "--store",
            type=Path,
            default=Path("registry.json"),
            help="JSON registry file holding the authority's settings.",
        )
        _ = common.add_argument(
            "--schema",
            type=Path,
            default=None,
            help=" ".join(
                [
                    "Schema file (.json, .yml, or .yaml) describing the managed settings.",
                    "If not provided, the built-in schema is used.",
                ]
            ),
        )

        subparsers = self.add_subparsers(
            dest="command",
            parser_class=argparse.ArgumentParser,
        )

        _ = subparsers.add_parser(
            "get",
            parents=[common],
            help="Print the current settings.",
        )

        for name, help_text in (
            ("test", "Check whether the registry matches a desired state."),
            ("set", "Converge the registry on a desired state."),
        ):
            sub = subparsers.add_parser(name, parents=[common], help=help_text)
            _ = sub.add_argument(
                "desired",
                type=Path,
                metavar="desired",
                help="Desired-state path (.json, .yml, or .yaml).",
            )

    def _load_config(self, schema: Path | None) -> EngineConfig:
        """Build the engine config, swapping in a schema file if given."""
        if schema is None:
            return EngineConfig()
        return EngineConfig(table=Schema.from_path(schema))

    def parse_command(self, argv: list[str] | None = None) -> Command:
        """Parse CLI arguments into a typed command payload."""
        args = self.parse_args(argv, namespace=_Args())
        config = self._load_config(args.schema)

        match args.command:
            case "get":
                return GetCommand(store=args.store, config=config)
            case "test" | "set" as name:
                if args.desired is None:
                    raise ValueError(f"{name} requires a desired-state path.")
                desired = DesiredState.from_path(args.desired)
                if name == "test":
                    return TestCommand(store=args.store, config=config, desired=desired)
                return SetCommand(store=args.store, config=config, desired=desired)
            case None:
                raise ValueError("No command given; use one of: get, test, set.")
            case _:
                raise ValueError(f"Invalid command: {args.command}")


def run(command: Command) -> int:
    """Execute a parsed command and return the process exit code."""
    store = JsonFileStore(command.store)
    resource = CertificationAuthoritySettings(
        store, restarter=AdvisoryRestarter(), config=command.config
    )

    match command:
        case GetCommand():
            snapshot = resource.get()
            logger.header("Get", str(command.store))
            logger.snapshot("Current settings", snapshot)
            return EXIT_OK

        case TestCommand() as cmd:
            drift = resource.drift(cmd.desired.settings)
            logger.header("Test", str(cmd.store))
            if not drift:
                logger.success("In desired state")
                return EXIT_OK
            logger.warning(f"{len(drift)} setting(s) out of desired state:")
            for name, (current, wanted) in drift.items():
                logger.drift(name, current, wanted)
            return EXIT_DRIFT

        case SetCommand() as cmd:
            logger.header("Set", str(cmd.store))
            count = resource.set(cmd.desired.settings)
            logger.applied(count, str(cmd.store))
            return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns exit code (0 for success, 2 for drift, 1 for failure).
    """
    try:
        return run(CLI().parse_command(argv))
    except Exception as e:
        logger.error(f"Error: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    import sys

    sys.exit(main())
