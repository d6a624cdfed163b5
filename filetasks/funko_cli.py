"""
Command-line interface for managing a user's Funko collection.

Examples::

    python -m filetasks.funko_cli add --user edusegre --id 1 --name "Sonic" \\
        --description "The blue hedgehog" --type "Pop!" --genre Videojuegos \\
        --franchise "Sonic the Hedgehog" --number 1 --exclusive false \\
        --features "Bobblehead" --value 15
    python -m filetasks.funko_cli list --user edusegre
    python -m filetasks.funko_cli show --user edusegre --id 1
    python -m filetasks.funko_cli delete --user edusegre --id 1
"""

import argparse
import logging
import sys

from termcolor import colored

try:
    from . import config
    from .collection import CollectionError, FunkoCollection, market_value_color
    from .funko import Funko
except ImportError:  # pragma: no cover - script execution path
    import config
    from collection import CollectionError, FunkoCollection, market_value_color
    from funko import Funko


LOGGER = logging.getLogger(__name__)

SEPARATOR = "-------------------------------"
TRUE_VALUES = {"true", "t", "yes", "y", "1"}
FALSE_VALUES = {"false", "f", "no", "n", "0"}


def parse_bool(raw: str) -> bool:
    """
    Parse a CLI boolean such as ``true``/``false``.

    :param raw: Raw argument text.
    :raises argparse.ArgumentTypeError: If the text is not a boolean.
    :returns: Parsed boolean.
    """

    normalized = raw.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {raw!r}")


def fmt_value(value: float) -> str:
    """Format a market value with two decimals and its tier color."""
    return colored(f"{value:.2f}", market_value_color(value))


def format_summary(funko: Funko) -> str:
    return (
        f"ID: {funko.id}\n"
        f"Name: {funko.name}\n"
        f"Type: {funko.type.value}\n"
        f"Market value: {fmt_value(funko.market_value)}"
    )


def format_details(funko: Funko) -> str:
    return (
        f"ID: {funko.id}\n"
        f"Name: {funko.name}\n"
        f"Description: {funko.description}\n"
        f"Type: {funko.type.value}\n"
        f"Genre: {funko.genre.value}\n"
        f"Franchise: {funko.franchise}\n"
        f"Number: {funko.number}\n"
        f"Exclusive: {'true' if funko.exclusive else 'false'}\n"
        f"Special features: {funko.special_features}\n"
        f"Market value: {fmt_value(funko.market_value)}"
    )


def _funko_from_args(args) -> Funko:
    return Funko(
        id=args.id,
        name=args.name,
        description=args.description,
        type=args.type,
        genre=args.genre,
        franchise=args.franchise,
        number=args.number,
        exclusive=args.exclusive,
        special_features=args.features,
        market_value=args.value,
    )


def cmd_add(args) -> str:
    FunkoCollection(args.user).add(_funko_from_args(args))
    return "New Funko added to the collection."


def cmd_update(args) -> str:
    FunkoCollection(args.user).update(_funko_from_args(args))
    return "Funko updated in the collection."


def cmd_delete(args) -> str:
    FunkoCollection(args.user).remove(args.id)
    return "Funko removed from the collection."


def cmd_list(args):
    funkos = FunkoCollection(args.user).list_funkos()
    if not funkos:
        print(colored("No Funkos in the collection.", "yellow"))
        return None

    print(colored(f"{args.user} - Funko collection", "blue"))
    print(SEPARATOR)
    for funko in funkos:
        print(format_summary(funko))
        print(SEPARATOR)
    return None


def cmd_show(args):
    funko = FunkoCollection(args.user).get(args.id)
    print(format_details(funko))
    return None


def _add_user_option(parser):
    parser.add_argument("--user", required=True, help="Collection owner.")


def _add_id_option(parser):
    parser.add_argument("--id", type=int, required=True, help="Funko identifier.")


def _add_item_options(parser):
    parser.add_argument("--name", required=True, help="Funko name.")
    parser.add_argument("--description", required=True, help="Funko description.")
    parser.add_argument("--type", required=True, help="Pop!, Pop! Rides, Vynil Soda or Vynil Gold.")
    parser.add_argument("--genre", required=True, help="Genre, e.g. Videojuegos.")
    parser.add_argument("--franchise", required=True, help="Franchise name.")
    parser.add_argument("--number", type=int, required=True, help="Number within the franchise.")
    parser.add_argument(
        "--exclusive",
        type=parse_bool,
        required=True,
        help="Whether the Funko is exclusive (true/false).",
    )
    parser.add_argument("--features", required=True, help="Special features.")
    parser.add_argument("--value", type=float, required=True, help="Market value.")


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser with one subcommand per collection operation."""
    parser = argparse.ArgumentParser(description="Manage a user's Funko collection.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add a new Funko to the collection.")
    _add_user_option(add_parser)
    _add_id_option(add_parser)
    _add_item_options(add_parser)
    add_parser.set_defaults(handler=cmd_add)

    update_parser = subparsers.add_parser("update", help="Update an existing Funko.")
    _add_user_option(update_parser)
    _add_id_option(update_parser)
    _add_item_options(update_parser)
    update_parser.set_defaults(handler=cmd_update)

    delete_parser = subparsers.add_parser("delete", help="Delete a Funko from the collection.")
    _add_user_option(delete_parser)
    _add_id_option(delete_parser)
    delete_parser.set_defaults(handler=cmd_delete)

    list_parser = subparsers.add_parser("list", help="List every Funko in the collection.")
    _add_user_option(list_parser)
    list_parser.set_defaults(handler=cmd_list)

    show_parser = subparsers.add_parser("show", help="Show one Funko in detail.")
    _add_user_option(show_parser)
    _add_id_option(show_parser)
    show_parser.set_defaults(handler=cmd_show)

    return parser


def main(argv=None) -> int:
    """
    CLI entry point.

    :param argv: Argument list; defaults to ``sys.argv[1:]``.
    :returns: Process exit code.
    """

    config.configure_logging()
    args = build_parser().parse_args(argv)
    try:
        message = args.handler(args)
    except (CollectionError, ValueError) as exc:
        LOGGER.info("%s command failed for %s.", args.command, args.user)
        print(colored(str(exc), "red"))
        return 1

    if message:
        print(colored(message, "green"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
