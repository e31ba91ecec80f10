"""Command-line entry point for p8p."""

from __future__ import annotations

import argparse
from pathlib import Path

from p8p.bootstrap import build_container
from p8p.core import AppSettings, configure_logging, load_app_settings


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(description="p8p service container")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="info",
        choices=["info", "inspect"],
        help="Operation to execute.",
    )
    return parser


def execute(args: argparse.Namespace, settings: AppSettings) -> None:
    """Execute the requested CLI command."""
    command = args.command
    if command == "info":
        print(f"Container name: {settings.container.name}")
        print(f"Log level: {settings.logging.level}")
        print(f"Parameters: {len(settings.container.parameters)}")
    elif command == "inspect":
        _run_inspect(settings)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_app_settings(env_file=args.env_file)
    configure_logging(settings.logging)
    execute(args, settings)


def _run_inspect(settings: AppSettings) -> None:
    """Bootstrap the container and list its keys without resolving them."""
    container = build_container(settings)

    print(f"Showing {len(container)} key(s):")
    header = f"{'Key':<24}  {'State':<10}  Type"
    print(header)
    print("-" * len(header))
    for key in container.keys():
        value = container.output(key)
        print(f"{str(key):<24}  {container.state(key).value:<10}  {type(value).__name__}")


if __name__ == "__main__":
    main()
