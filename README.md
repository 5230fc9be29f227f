# mansion

My Mansion is a small game shell built on pygame. Every scene is drawn on a
1280 x 720 logical surface, which is scaled into the window with black
letterbox borders, so the window can be resized freely.

When the game starts, a circle grows from the centre of the screen over 1.6
seconds until it covers the whole screen. The main menu follows.

## Installing

```
pip install .
```

## Running

```
mansion
```

By default the text is drawn with the TrueType font at
`assets/fonts/LuckiestGuy-Regular.ttf`, relative to the current directory.
Give another font with `--font`:

```
mansion --font path/to/font.ttf
```

The game runs at up to 60 frames per second and stops when the window is
closed or *Salir* is chosen.

## Controls

Main menu:

- Up / Down: move the selection (it wraps around)
- Enter, keypad Enter or Space: pick the selected option
  - *Ajustes* opens the settings screen
  - *Salir* closes the window

Settings:

- Up / Down: move through the 16:9 resolutions, from 1280 x 720 up to
  3840 x 2160; on opening, the one matching the current window size is selected
- Enter, keypad Enter or Space: resize the window to the selected resolution
- F11 or F: switch full screen on or off
- Escape: go back to the main menu

## Using it as a library

The scenes do not need a real display to be updated. They take a collection
of pressed keys (`mansion.controls.Key`) and a `mansion.controls.Window`,
a plain object that records size, full-screen and closed state. This makes
them easy to drive from tests:

```python
from mansion.controls import Key, SceneID, Window
from mansion.scenes import SceneManager

window = Window()
manager = SceneManager(window)
manager.update(set(), 2.0)          # the reveal transition finishes
assert manager.current() is SceneID.MENU
manager.update({Key.DOWN}, 0.016)
manager.update({Key.ENTER}, 0.016)  # opens the settings screen
assert manager.current() is SceneID.SETTINGS
```

Other pieces:

- `mansion.transition.TransitionCircle` tracks the progress of the reveal;
  `radius(width, height)` gives the circle's radius for a screen size.
- `mansion.menu.MenuScene` and `mansion.settings.SettingsScene` return the
  `SceneID` to switch to from `update`, or `None`.
- `mansion.app.letterbox(window_width, window_height)` returns the
  `pygame.Rect` that the logical surface is scaled into: the largest
  rectangle with its aspect ratio, centred in the window.
- `mansion.app.translate_keys(events)` turns pygame key-down events into the
  set of `Key` values the scenes react to.
- `mansion.app.PygameWindow` is a `Window` backed by a resizable pygame
  display.

## What it does not do

There is no game yet: the menu's *Comenzar* option does nothing, and the
settings screen only changes the resolution and full-screen mode. No font
file is shipped with the package; without one at the default path, pass
`--font`.

## Tests

```
pip install .[test]
pytest
```