import pygame
import pytest

from novella.color import Color
from novella.window import Window, WindowFlags


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.quit()
    yield
    pygame.display.quit()


def test_flag_values_follow_config_bits(display):
    assert WindowFlags.RESIZABLE == 4
    assert WindowFlags.FULLSCREEN == 2
    combined = WindowFlags.RESIZABLE | WindowFlags.UNDECORATED
    window = Window(320, 240, "test", 60, flags=combined)
    assert WindowFlags.RESIZABLE in window.flags
    assert WindowFlags.UNDECORATED in window.flags
    assert WindowFlags.HIDDEN not in window.flags


def test_open_window(display):
    window = Window(320, 240, "test", 60)
    assert window.is_open()
    assert window.title == "test"
    assert window.size.x == 320 and window.size.y == 240
    assert pygame.display.get_caption()[0] == "test"


def test_flags_stored(display):
    window = Window(320, 240, "test", 60, flags=WindowFlags.RESIZABLE)
    assert window.flags == WindowFlags.RESIZABLE


def test_set_flags_after_open_raises(display):
    window = Window(320, 240, "test", 60)
    with pytest.raises(RuntimeError):
        window.set_flags(WindowFlags.RESIZABLE)


def test_second_window_does_not_reopen(display):
    Window(320, 240, "first", 60)
    second = Window(640, 480, "second", 30)
    assert pygame.display.get_caption()[0] == "first"
    assert second.size.x == 320


def test_title_setter(display):
    window = Window(320, 240, "test", 60)
    window.title = "hola"
    assert window.title == "hola"
    assert pygame.display.get_caption()[0] == "hola"


def test_quit_event_closes(display):
    window = Window(320, 240, "test", 60)
    window.process_events([pygame.event.Event(pygame.QUIT)])
    assert not window.is_open()


def test_resize_flag_lasts_one_frame(display):
    window = Window(320, 240, "test", 60)
    event = pygame.event.Event(pygame.VIDEORESIZE, size=(640, 480), w=640, h=480)
    window.process_events([event])
    assert window.is_resized()
    window.process_events([])
    assert not window.is_resized()


def test_close(display):
    window = Window(320, 240, "test", 60)
    window.close()
    assert not window.is_open()
    with pytest.raises(RuntimeError):
        window.surface


def test_clear_fills_surface(display):
    window = Window(32, 24, "test", 60)
    window.clear(Color(255, 0, 0, 255))
    assert tuple(window.surface.get_at((0, 0))) == (255, 0, 0, 255)


def test_set_icon_missing_file(display, tmp_path):
    window = Window(32, 24, "test", 60)
    with pytest.raises(FileNotFoundError):
        window.set_icon(tmp_path / "missing.png")


def test_icon_missing_at_construction(display, tmp_path):
    with pytest.raises(FileNotFoundError):
        Window(32, 24, "test", 60, icon=tmp_path / "missing.png")


def test_size_setter(display):
    window = Window(32, 24, "test", 60)
    window.size = window.size * 2
    assert window.size.x == 64 and window.size.y == 48
    assert window.is_resized()