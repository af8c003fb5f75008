from __future__ import annotations

import argparse
import logging
import sys

import config
from bootstrap import bootstrap_repository
from gui.controllers import FinanceController

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Personal finance tracker: record incomes and expenses, review totals."
    )
    parser.add_argument(
        "--store",
        default=config.STORE_PATH,
        help="Path to the secure store file (default: <project>/secure_store.json)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the category summary table and exit",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Erase both ledgers and exit",
    )
    parser.add_argument(
        "--no-backup",
        action="store_true",
        help="Skip the store backup taken on start",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def build_controller(store_path: str, *, backup: bool) -> FinanceController:
    repository = bootstrap_repository(store_path, backup=backup)
    return FinanceController(
        repository,
        palette=config.CHART_PALETTE,
        currency_symbol=config.CURRENCY_SYMBOL,
        strict_amounts=config.STRICT_AMOUNTS,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    controller = build_controller(args.store, backup=not args.no_backup)

    if args.clear:
        controller.clear_all()
        print("Data cleared")
        return 0

    if args.summary:
        controller.load()
        print(controller.build_report().as_table())
        return 0

    from gui.tkinter_gui import run

    run(controller, config.CURRENCY_SYMBOL)
    return 0


if __name__ == "__main__":
    sys.exit(main())
