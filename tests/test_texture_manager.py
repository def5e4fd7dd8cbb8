import pygame
import pytest

from hearbund.texture_manager import FlipMode, TextureError, TextureManager

RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
BLACK = (0, 0, 0)


def _color(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def two_tone(tmp_path):
    """A 64x32 image: left half red, right half blue."""
    image = pygame.Surface((64, 32))
    image.fill(RED, pygame.Rect(0, 0, 32, 32))
    image.fill(BLUE, pygame.Rect(32, 0, 32, 32))
    path = tmp_path / "two_tone.bmp"
    pygame.image.save(image, str(path))
    return path


@pytest.fixture
def stacked(tmp_path):
    """A 32x64 image: top half red, bottom half green."""
    image = pygame.Surface((32, 64))
    image.fill(RED, pygame.Rect(0, 0, 32, 32))
    image.fill(GREEN, pygame.Rect(0, 32, 32, 32))
    path = tmp_path / "stacked.bmp"
    pygame.image.save(image, str(path))
    return path


@pytest.fixture
def manager():
    return TextureManager()


def test_instance_is_shared(two_tone):
    shared = TextureManager.instance()
    assert TextureManager.instance() is shared
    shared.load(two_tone, "shared_sheet")
    try:
        texture = TextureManager.instance().get_texture("shared_sheet")
        assert texture.get_size() == (64, 32)
    finally:
        shared.clean()
    assert TextureManager.instance().get_texture("shared_sheet") is None


def test_load_registers_texture(manager, two_tone):
    manager.load(two_tone, "sheet")
    texture = manager.get_texture("sheet")
    assert texture.get_size() == (64, 32)


def test_load_missing_file_raises(manager, tmp_path):
    with pytest.raises(TextureError):
        manager.load(tmp_path / "missing.bmp", "nothing")
    assert manager.get_texture("nothing") is None


def test_unknown_texture_is_none(manager):
    assert manager.get_texture("absent") is None


def test_draw_copies_top_left_region(manager, two_tone):
    manager.load(two_tone, "sheet")
    target = pygame.Surface((100, 100))
    manager.draw("sheet", 10, 20, 32, 32, target)
    assert _color(target, (10, 20)) == RED
    assert _color(target, (41, 51)) == RED
    assert _color(target, (42, 20)) == BLACK
    assert _color(target, (9, 20)) == BLACK


def test_draw_frame_selects_column(manager, two_tone):
    manager.load(two_tone, "sheet")
    target = pygame.Surface((32, 32))
    manager.draw_frame("sheet", 0, 0, 32, 32, 1, 2, target)
    assert _color(target, (0, 0)) == BLUE
    assert _color(target, (31, 31)) == BLUE


def test_draw_frame_selects_row(manager, stacked):
    manager.load(stacked, "sheet")
    target = pygame.Surface((32, 32))
    manager.draw_frame("sheet", 0, 0, 32, 32, 2, 1, target)
    assert _color(target, (16, 16)) == GREEN


def test_draw_without_flip_keeps_orientation(manager, two_tone):
    manager.load(two_tone, "sheet")
    target = pygame.Surface((64, 32))
    manager.draw("sheet", 0, 0, 64, 32, target, FlipMode.NONE)
    assert _color(target, (0, 0)) == RED
    assert _color(target, (63, 0)) == BLUE


def test_draw_horizontal_flip(manager, two_tone):
    manager.load(two_tone, "sheet")
    target = pygame.Surface((64, 32))
    manager.draw("sheet", 0, 0, 64, 32, target, FlipMode.HORIZONTAL)
    assert _color(target, (0, 0)) == BLUE
    assert _color(target, (63, 0)) == RED


def test_draw_vertical_flip(manager, stacked):
    manager.load(stacked, "sheet")
    target = pygame.Surface((32, 64))
    manager.draw("sheet", 0, 0, 32, 64, target, FlipMode.VERTICAL)
    assert _color(target, (0, 0)) == GREEN
    assert _color(target, (0, 63)) == RED


def test_draw_unknown_texture_leaves_surface(manager):
    target = pygame.Surface((16, 16))
    target.fill(GREEN)
    manager.draw("absent", 0, 0, 16, 16, target)
    assert _color(target, (8, 8)) == GREEN


def test_clean_forgets_textures(manager, two_tone):
    manager.load(two_tone, "a")
    manager.load(two_tone, "b")
    manager.clean()
    assert manager.get_texture("a") is None
    assert manager.get_texture("b") is None