import pygame
import pytest

from mansion.controls import GAME_HEIGHT, GAME_WIDTH, Key, SceneID, Window, _Fonts


def test_window_starts_at_game_size():
    window = Window()
    assert window.size() == (GAME_WIDTH, GAME_HEIGHT)
    assert window.closed is False
    assert window.fullscreen is False


def test_resize_changes_size():
    window = Window()
    window.resize(1920, 1080)
    assert window.size() == (1920, 1080)


def test_toggle_fullscreen_twice_restores():
    window = Window()
    window.toggle_fullscreen()
    assert window.fullscreen is True
    window.toggle_fullscreen()
    assert window.fullscreen is False


def test_close_marks_window_closed():
    window = Window()
    window.close()
    assert window.closed is True


@pytest.mark.parametrize("scene", list(SceneID))
def test_scene_ids_round_trip_by_value(scene):
    assert SceneID(scene.value) is scene


def test_scene_ids_are_distinct():
    looked_up = {SceneID(scene.value) for scene in SceneID}
    assert looked_up == {SceneID.TRANSITION, SceneID.MENU, SceneID.SETTINGS}
    assert len(looked_up) == 3


def test_keys_are_distinct():
    looked_up = {Key(key.value) for key in Key}
    assert len(looked_up) == 8


def test_measure_grows_with_spacing():
    fonts = _Fonts(None)
    narrow, height = fonts.measure("abc", 20, 0)
    wide, _ = fonts.measure("abc", 20, 5)
    assert wide == narrow + 10
    assert height > 0


def test_draw_changes_surface():
    fonts = _Fonts(None)
    surface = pygame.Surface((200, 60))
    surface.fill((0, 0, 0))
    fonts.draw(surface, "X", (10, 10), 30, 0, (255, 255, 255))
    mask = pygame.mask.from_threshold(surface, (255, 255, 255), (1, 1, 1, 255))
    assert mask.count() > 0