"""Entry point kept minimal by delegating to Engine.

Picks a demo (banner, crawler or both stacked), builds its scene inside the
engine's GL context and runs the loop:

    python main.py banner --variant wide
    python main.py combined --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random

from banner.bannerscene import BannerScene
from banner.state import BANNER_VARIANTS, BannerConfig
from combinedscene import CombinedScene, combined_size
from config import LOG_FORMAT
from core.engine import Engine
from crawler.actions import GameState
from crawler.crawlerscene import CrawlerScene, crawler_size

logger = logging.getLogger(__name__)

DEMOS = ("banner", "crawler", "combined")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Animated night-sky banner and door crawler demos")
    ap.add_argument("demo", nargs="?", choices=DEMOS, default="combined", help="Which demo to run")
    ap.add_argument(
        "--variant",
        choices=sorted(BANNER_VARIANTS),
        default=None,
        help="Banner variant (default: classic, or shutter for the combined page)",
    )
    ap.add_argument("--seed", type=int, default=None, help="Seed for the banner's random layout")
    ap.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    return ap


def banner_config(args: argparse.Namespace) -> BannerConfig:
    # The combined page needs the shutter; the lone banner defaults to classic
    default = "classic" if args.demo == "banner" else "shutter"
    return BANNER_VARIANTS[args.variant or default]


def make_engine(args: argparse.Namespace) -> Engine:
    rng = random.Random(args.seed)
    if args.demo == "banner":
        config = banner_config(args)
        return Engine(config.width, config.height, lambda: BannerScene(config, rng=rng))
    if args.demo == "crawler":
        state = GameState.new()
        width, height = crawler_size(state)
        return Engine(width, height, lambda: CrawlerScene(state))
    config = banner_config(args)
    state = GameState.new()
    width, height = combined_size(config, state)
    return Engine(width, height, lambda: CombinedScene(config, state, rng=rng))


def main(argv=None):  # small wrapper for clarity / debuggers
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)
    logger.info("Starting %s demo", args.demo)
    make_engine(args).run()


if __name__ == "__main__":
    main()
