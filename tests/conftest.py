import random

import pytest

from banner.state import BANNER_VARIANTS, BannerState
from crawler.actions import GameState
from crawler.player import Player

# Small room: a horizontal door at (2, 2) and a vertical door at (5, 4)
SMALL_MAP = (
    "╔═════════╗",
    "║         ║",
    "╠═0═══════╣",
    "║    ║    ║",
    "║    1    ║",
    "║    ║    ║",
    "╚═════════╝",
)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def banner(rng):
    return BannerState(BANNER_VARIANTS["classic"], rng=rng)


@pytest.fixture
def shutter_banner(rng):
    return BannerState(BANNER_VARIANTS["shutter"], rng=rng)


@pytest.fixture
def small_state():
    return GameState.new(SMALL_MAP, Player(x=2, y=3))
