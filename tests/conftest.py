from typing import Generator

import pytest

from config import config
from domain.pawn_shop import PawnShop


@pytest.fixture(scope="function")
def shop() -> PawnShop:
    return PawnShop()


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Generator[None, None, None]:
    config.cache_clear()
    yield
    config.cache_clear()
