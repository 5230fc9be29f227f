"""My Mansion: a pygame game with a reveal transition, a main menu and a settings screen."""

__version__ = "0.1.0"
__all__ = ["app", "controls", "menu", "scenes", "settings", "transition"]