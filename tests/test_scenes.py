import pygame
import pytest

from mansion.controls import GAME_HEIGHT, GAME_WIDTH, Key, SceneID, Window
from mansion.menu import MENU_BG_COLOR
from mansion.scenes import SceneManager
from mansion.transition import TRANSITION_DURATION


@pytest.fixture
def window():
    return Window()


@pytest.fixture
def manager(window):
    return SceneManager(window, None)


def _finish_transition(manager):
    manager.update(frozenset(), TRANSITION_DURATION)


def test_starts_in_transition(manager):
    assert manager.current() is SceneID.TRANSITION


def test_transition_leads_to_menu(manager):
    manager.update(frozenset(), TRANSITION_DURATION / 2)
    assert manager.current() is SceneID.TRANSITION
    manager.update(frozenset(), TRANSITION_DURATION / 2)
    assert manager.current() is SceneID.MENU


def test_keys_ignored_during_transition(manager):
    manager.update(frozenset({Key.DOWN}), 0.1)
    assert manager.current() is SceneID.TRANSITION
    assert manager.menu.selected == 0


def test_menu_to_settings(manager):
    _finish_transition(manager)
    manager.update(frozenset({Key.DOWN}), 0.016)
    manager.update(frozenset({Key.ENTER}), 0.016)
    assert manager.current() is SceneID.SETTINGS


def test_settings_selects_current_resolution(window, manager):
    window.resize(1920, 1080)
    manager.change(SceneID.SETTINGS)
    chosen = manager.settings.resolutions[manager.settings.selected]
    assert (chosen.width, chosen.height) == (1920, 1080)


def test_settings_escape_returns_to_menu_with_reset(manager):
    _finish_transition(manager)
    manager.update(frozenset({Key.DOWN}), 0.016)
    assert manager.menu.selected == 1
    manager.update(frozenset({Key.SPACE}), 0.016)
    manager.update(frozenset({Key.ESCAPE}), 0.016)
    assert manager.current() is SceneID.MENU
    assert manager.menu.selected == 0


def test_settings_enter_resizes_window(window, manager):
    manager.change(SceneID.SETTINGS)
    manager.update(frozenset({Key.DOWN}), 0.016)
    manager.update(frozenset({Key.ENTER}), 0.016)
    expected = manager.settings.resolutions[1]
    assert window.size() == (expected.width, expected.height)


def test_menu_exit_closes_window(window, manager):
    _finish_transition(manager)
    manager.update(frozenset({Key.UP}), 0.016)
    manager.update(frozenset({Key.KP_ENTER}), 0.016)
    assert window.closed is True
    assert manager.current() is SceneID.MENU


def test_change_to_transition_restarts_it(manager):
    _finish_transition(manager)
    manager.change(SceneID.TRANSITION)
    assert manager.current() is SceneID.TRANSITION
    assert manager.transition.is_done() is False
    assert manager.transition.progress == 0.0


def test_draw_transition_starts_black(manager):
    surface = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
    manager.draw(surface)
    assert tuple(surface.get_at((GAME_WIDTH // 2, GAME_HEIGHT // 2)))[:3] == (0, 0, 0)


def test_draw_menu_background(manager):
    _finish_transition(manager)
    surface = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
    manager.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == MENU_BG_COLOR


def test_unload_releases_fonts(manager):
    _finish_transition(manager)
    surface = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
    manager.draw(surface)
    assert manager.menu._fonts._cache
    manager.unload()
    assert manager.menu._fonts._cache == {}
    assert manager.settings._fonts._cache == {}