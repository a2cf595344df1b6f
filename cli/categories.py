#!/usr/bin/env python3

import sys
import json
from errors import CategoryError, NotFoundError
from models.category import COLOR_OPTIONS, Urgency
from logger import get_logger

logger = get_logger()


def _log_category(category):
    logger.info(f"ID: {category.id}")
    logger.info(f"Name: {category.name}")
    logger.info(f"Urgency: {category.urgency.label}")
    logger.info(f"Color: {category.color}")
    if category.description:
        logger.info(f"Description: {category.description}")
    if category.subcategories:
        logger.info(f"Subcategories: {', '.join(category.subcategories)}")


def _split_subcategories(raw):
    """Split comma-separated input, dropping blanks and repeated entries."""
    subcategories = [sub.strip() for sub in raw.split(",") if sub.strip()]
    return list(dict.fromkeys(subcategories))


def cmd_list(args, services):
    """List all categories."""
    categories = services.categories.list_all()

    if args.json:
        print(json.dumps([c.to_dict() for c in categories], indent=2))
        return

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        _log_category(category)
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_show(args, services):
    """Show a single category by ID."""
    try:
        category = services.categories.get_by_id(args.category_id)
    except NotFoundError as e:
        logger.error(str(e))
        sys.exit(1)

    _log_category(category)


def cmd_search(args, services):
    """Search categories by name or subcategory."""
    matches = services.categories.search(args.query)

    if not matches:
        logger.info(f'No categories match "{args.query}".')
        return

    for category in matches:
        logger.info(f"{category.id:>4}  {category.name}")
    logger.info(f"\nMatches: {len(matches)}")


def cmd_names(args, services):
    """List category names."""
    for name in services.categories.list_category_names():
        print(name)


def cmd_subcategories(args, services):
    """List the subcategories of a category."""
    subcategories = services.categories.list_subcategories(args.category_name)

    if not subcategories:
        logger.info(f"No subcategories found for '{args.category_name}'.")
        return

    for subcategory in subcategories:
        print(subcategory)


def cmd_create(args, services):
    """Interactively create a new category."""
    print("\nCreate New Category")
    print("=" * 80)

    name = input("Category name (e.g., Operations): ").strip()
    if not name:
        logger.error("Category name cannot be empty.")
        sys.exit(1)

    description = input("Description (optional, press Enter to skip): ").strip()

    print(f"\nUrgency levels: {', '.join(u.value for u in Urgency)}")
    urgency = input("Urgency (press Enter for medium): ").strip() or None

    print(f"\nColors: {', '.join(COLOR_OPTIONS)}")
    color = input("Color (press Enter for default): ").strip() or None

    subcategories = _split_subcategories(
        input("Subcategories, comma-separated (optional): ")
    )

    try:
        category = services.categories.create(
            {
                "name": name,
                "description": description,
                "urgency": urgency,
                "color": color,
                "subcategories": subcategories,
            }
        )

        logger.info(f"\n✓ Category created successfully with ID: {category.id}")
        _log_category(category)

    except CategoryError as e:
        logger.error(f"Error creating category: {e}")
        sys.exit(1)


def cmd_update(args, services):
    """Update fields of an existing category."""
    patch = {}
    if args.name is not None:
        patch["name"] = args.name
    if args.description is not None:
        patch["description"] = args.description
    if args.urgency is not None:
        patch["urgency"] = args.urgency
    if args.color is not None:
        patch["color"] = args.color
    if args.subcategories is not None:
        patch["subcategories"] = _split_subcategories(args.subcategories)

    if not patch:
        logger.error("Nothing to update. Pass at least one field option.")
        sys.exit(1)

    try:
        category = services.categories.update(args.category_id, patch)
    except CategoryError as e:
        logger.error(f"Error updating category: {e}")
        sys.exit(1)

    logger.info(f"✓ Category '{category.name}' updated successfully.")
    _log_category(category)


def cmd_delete(args, services):
    """Delete a category by ID."""
    category_id = args.category_id

    try:
        category = services.categories.get_by_id(category_id)
    except NotFoundError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info("\nCategory to delete:")
    logger.info(f"  ID: {category.id}")
    logger.info(f"  Name: {category.name}")

    if not args.yes:
        confirm = (
            input("\nAre you sure you want to delete this category? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    services.categories.delete(category_id)
    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Browse, create, update, and delete task categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.add_argument(
        "--json", action="store_true", help="Print categories as JSON"
    )
    list_parser.set_defaults(func=cmd_list)

    # categories show
    show_parser = categories_subparsers.add_parser(
        "show", help="Show a category by ID"
    )
    show_parser.add_argument("category_id", type=int, help="ID of the category")
    show_parser.set_defaults(func=cmd_show)

    # categories search
    search_parser = categories_subparsers.add_parser(
        "search", help="Search categories by name or subcategory"
    )
    search_parser.add_argument("query", help="Case-insensitive text to look for")
    search_parser.set_defaults(func=cmd_search)

    # categories names
    names_parser = categories_subparsers.add_parser(
        "names", help="List category names"
    )
    names_parser.set_defaults(func=cmd_names)

    # categories subcategories
    subcategories_parser = categories_subparsers.add_parser(
        "subcategories", help="List the subcategories of a category"
    )
    subcategories_parser.add_argument(
        "category_name", help="Exact name of the category"
    )
    subcategories_parser.set_defaults(func=cmd_subcategories)

    # categories create
    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category interactively"
    )
    create_parser.set_defaults(func=cmd_create)

    # categories update
    update_parser = categories_subparsers.add_parser(
        "update", help="Update a category by ID"
    )
    update_parser.add_argument("category_id", type=int, help="ID of the category")
    update_parser.add_argument("--name", help="New name")
    update_parser.add_argument("--description", help="New description")
    update_parser.add_argument(
        "--urgency", choices=[u.value for u in Urgency], help="New urgency level"
    )
    update_parser.add_argument("--color", help="New display color (hex code)")
    update_parser.add_argument(
        "--subcategories", help="Comma-separated list replacing the current one"
    )
    update_parser.set_defaults(func=cmd_update)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by ID"
    )
    delete_parser.add_argument(
        "category_id",
        type=int,
        help="ID of the category to delete",
    )
    delete_parser.add_argument(
        "-y", "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)
