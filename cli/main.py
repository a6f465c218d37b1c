"""Command-line export of catalogue tasks as Colab notebooks.

Examples::

    psx-analytics --list
    psx-analytics 8 --out ./notebooks --no-browser
"""

import argparse
import logging
import sys
from typing import List

from analytics.delivery import LocalDelivery
from analytics.notebook_export import InvalidInput, open_in_colab
from catalogue.store import get_default_store
from core.logging_setup import setup_logging
from core.metadata import __project__, __version__

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psx-analytics",
        description=f"{__project__}: export task snippets as Colab notebooks",
    )
    parser.add_argument("task_id", nargs="?", type=int, help="Id of the task to export")
    parser.add_argument("--list", action="store_true", help="List tasks by category and exit")
    parser.add_argument("--out", help="Directory for the .ipynb file (default: PSX_DOWNLOAD_DIR)")
    parser.add_argument(
        "--no-browser", action="store_true", help="Do not open Google Colab after exporting"
    )
    parser.add_argument("--version", action="store_true", help="Print version information and exit")
    return parser


def _print_catalogue() -> None:
    store = get_default_store()
    for category in store.list_categories():
        print(category)
        for task in store.filter(category):
            print(f"  [{task.id:>3}] {task.title}")


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging()

    if args.version:
        print(f"{__project__} {__version__}")
        return 0
    if args.list:
        _print_catalogue()
        return 0
    if args.task_id is None:
        parser.print_usage(sys.stderr)
        return 2

    task = get_default_store().get(args.task_id)
    if task is None:
        print(f"Unknown task id: {args.task_id}", file=sys.stderr)
        return 1

    delivery = LocalDelivery(args.out, open_browser=not args.no_browser)
    try:
        open_in_colab(task.code, task.title, delivery=delivery)
    except InvalidInput as e:
        print(f"Cannot export task {task.id}: {e}", file=sys.stderr)
        return 1

    if delivery.saved_path is not None:
        print(f"Notebook written to {delivery.saved_path}")
        return 0
    print("Notebook could not be written; see log output.", file=sys.stderr)
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
