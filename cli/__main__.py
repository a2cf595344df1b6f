#!/usr/bin/env python3
"""
taskcat CLI - Command-line interface for the task category directory.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Browse and manage categories
    tasks        Inspect task lists

Examples:
    python -m cli categories list
    python -m cli categories search test
    python -m cli categories subcategories Design
    python -m cli categories update 3 --urgency high
    python -m cli tasks categories tasks.json
"""

import sys
import argparse
from cli import categories, tasks
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="taskcat - Task category management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)
    tasks.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
