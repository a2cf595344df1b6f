#!/usr/bin/env python3

import sys
import json
from pathlib import Path
from models.task import Task
from tools.filters import derive_filter_categories
from logger import get_logger

logger = get_logger()


def load_tasks(path: Path):
    """Load a JSON array of task objects from path."""
    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError("Task file must contain a JSON array of tasks")

    return [Task.from_dict(item) for item in data]


def cmd_categories(args, services):
    """Print the distinct categories used by tasks in a JSON file."""
    task_file = Path(args.task_file)

    if not task_file.exists():
        logger.error(f"Task file not found: {task_file}")
        sys.exit(1)

    try:
        tasks = load_tasks(task_file)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON file: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    categories = derive_filter_categories(tasks)

    if not categories:
        logger.info("No task uses a category.")
        return

    known = set(services.categories.list_category_names())
    for category in categories:
        marker = "" if category in known else "  (not in directory)"
        print(f"{category}{marker}")


def setup_parser(subparsers):
    """Setup tasks subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "tasks",
        help="Inspect task lists",
        description="Derive filter options from task lists",
    )

    tasks_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available task commands",
        dest="subcommand",
        required=True,
    )

    # tasks categories
    categories_parser = tasks_subparsers.add_parser(
        "categories", help="List distinct categories used by tasks"
    )
    categories_parser.add_argument(
        "task_file", help="Path to a JSON array of task objects"
    )
    categories_parser.set_defaults(func=cmd_categories)
