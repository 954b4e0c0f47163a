from __future__ import annotations

import argparse
import logging
from typing import Sequence

from config import config
from domain.pawn_shop import PawnShop
from shell.console import Console

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def run(*, shop_name: str) -> PawnShop:
    shop = PawnShop()
    Console(shop, shop_name=shop_name).run()
    return shop


def main(argv: Sequence[str] | None = None) -> None:
    settings = config()
    parser = argparse.ArgumentParser(description="Interactive pawn shop inventory manager.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level.upper())
    parser.add_argument("--shop-name", default=settings.shop_name)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    run(shop_name=args.shop_name)


if __name__ == "__main__":
    main()
