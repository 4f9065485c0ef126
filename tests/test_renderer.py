import pygame as pg
import pytest

from worm.renderer import WormRenderer

GREEN = pg.Color(0, 255, 0)
RED = pg.Color(255, 0, 0)
BLACK = pg.Color(0, 0, 0)


@pytest.fixture
def renderer(screen):
    return WormRenderer(screen, cell_size=20, show_score=False)


def test_paint_fills_worm_and_food_cells(renderer, screen, state_factory):
    s = state_factory(food=(3, 5))
    renderer.paint(s, 1.0)
    assert screen.get_at((10, 10)) == GREEN   # (0,0)
    assert screen.get_at((10, 30)) == GREEN   # (0,1)
    assert screen.get_at((70, 110)) == RED    # food
    assert screen.get_at((50, 50)) == BLACK


def test_paint_clears_previous_frame(renderer, screen, state_factory):
    screen.fill(pg.Color(255, 255, 255))
    renderer.paint(state_factory(food=(3, 5)), 0.0)
    assert screen.get_at((50, 50)) == BLACK


def test_paint_draws_half_way_positions(renderer, screen, state_factory):
    s = state_factory(food=(3, 5))
    s.tick()  # (0,0),(0,1) -> (0,1),(0,2)
    renderer.paint(s, 0.5)
    # tail at y=0.5 covers pixels 10..29, head at y=1.5 covers 30..49
    assert screen.get_at((10, 5)) == BLACK
    assert screen.get_at((10, 15)) == GREEN
    assert screen.get_at((10, 45)) == GREEN
    assert screen.get_at((10, 55)) == BLACK


def test_food_is_never_interpolated(renderer, screen, state_factory):
    s = state_factory(food=(2, 3))
    renderer.paint(s, 0.5)
    assert screen.get_at((41, 61)) == RED
    assert screen.get_at((58, 78)) == RED


def test_paint_with_score(screen, state_factory):
    r = WormRenderer(screen, cell_size=20, show_score=True)
    r.paint(state_factory(food=(3, 5)), 1.0)
    assert screen.get_at((70, 110)) == RED


def test_cell_size_must_be_positive(screen):
    with pytest.raises(ValueError):
        WormRenderer(screen, cell_size=0)
