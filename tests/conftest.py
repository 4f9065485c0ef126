import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so worm.* and main work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    # event queue and timers need a (dummy) display
    pg.display.set_mode((1, 1))
    yield
    pg.quit()


@pytest.fixture
def screen():
    # Plain Surface matching a 4x6 grid of 20px cells
    return pg.Surface((80, 120))


@pytest.fixture
def state_factory():
    from worm.state import WormState
    def make(grid_width=4, grid_height=6, seed=0, food=None):
        state = WormState(grid_width, grid_height, seed=seed)
        if food is not None:
            state.food = food
        return state
    return make
