"""Window-level input state of an interactive viewer.

The state keeps track of pressed mouse buttons and modifier keys, the
visibility and scale of the GUI, the help dialog's key bindings and the
numbering of screenshots. Key events are turned into commands that the
windowing layer carries out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

HELP_KEY = ord("?")
GUI_SCALE_UP = 1.25
GUI_SCALE_DOWN = 0.8


class Action(Enum):
    """What happened to a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class MouseButton(IntEnum):
    """Mouse buttons tracked by the viewer."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Modifier(Enum):
    """Modifier keys tracked by the viewer."""

    CTRL = "ctrl"
    SHIFT = "shift"
    ALT = "alt"


class Command(Enum):
    """Requests produced by key events for the windowing layer."""

    QUIT = "quit"
    SCREENSHOT = "screenshot"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    TOGGLE_GUI = "toggle_gui"
    SCALE_GUI = "scale_gui"


_QUIT_KEYS = frozenset({"ESCAPE", "Q"})


def _normalize_key(key: str) -> str:
    return key.replace(" ", "").replace("_", "").upper()


@dataclass
class ViewerState:
    """Input and GUI state of a viewer window."""

    title: str
    width: int
    height: int
    show_gui: bool = True
    scaling: float = 1.0
    gui_scale: float = 1.0
    show_help: bool = False
    help_items: list[tuple[str, str]] = field(default_factory=list)
    buttons: set[MouseButton] = field(default_factory=set)
    modifiers: set[Modifier] = field(default_factory=set)
    screenshot_number: int = 0

    def __init__(self, title: str, width: int, height: int, show_gui: bool = True) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self.title = title.replace(" ", "_")
        self.width = width
        self.height = height
        self.show_gui = show_gui
        self.scaling = 1.0
        self.gui_scale = 1.0
        self.show_help = False
        self.help_items = []
        self.buttons = set()
        self.modifiers = set()
        self.screenshot_number = 0

        self.add_help_item("F", "Toggle fullscreen mode")
        self.add_help_item("G", "Toggle GUI dialog")
        self.add_help_item("PageUp/Down", "Scale GUI dialogs")
        self.add_help_item("PrtScr", "Save screenshot")
        self.add_help_item("Esc/Q", "Quit application")

    # help dialog

    def add_help_item(self, key: str, description: str, position: int = -1) -> None:
        """Add a key binding to the help dialog, appended or at ``position``."""
        if position == -1:
            self.help_items.append((key, description))
            return
        if not 0 <= position <= len(self.help_items):
            raise IndexError(f"help item position {position} out of range")
        self.help_items.insert(position, (key, description))

    def clear_help_items(self) -> None:
        self.help_items.clear()

    # events

    def character(self, code: int | str) -> None:
        """Handle a unicode character; '?' opens the help dialog."""
        if isinstance(code, str):
            if len(code) != 1:
                raise ValueError("expected a single character")
            code = ord(code)
        if code == HELP_KEY:
            self.show_help = True
            self.show_gui = True

    def keyboard(self, key: str, action: Action) -> Command | None:
        """Handle a key event and return the command it requests, if any.

        GUI visibility and scale are updated here; quitting, screenshots and
        fullscreen switching are left to the caller.
        """
        if action not in (Action.PRESS, Action.REPEAT):
            return None
        name = _normalize_key(key)
        if name in _QUIT_KEYS:
            return Command.QUIT
        if name in ("PRINTSCREEN", "PRTSCR"):
            return Command.SCREENSHOT
        if name == "F":
            return Command.TOGGLE_FULLSCREEN
        if name == "G":
            self.toggle_gui()
            return Command.TOGGLE_GUI
        if name == "PAGEUP":
            self.scale_gui(GUI_SCALE_UP)
            return Command.SCALE_GUI
        if name == "PAGEDOWN":
            self.scale_gui(GUI_SCALE_DOWN)
            return Command.SCALE_GUI
        return None

    def modifier_event(self, modifier: Modifier, action: Action) -> None:
        """Record whether a modifier key is held down."""
        if action is Action.RELEASE:
            self.modifiers.discard(modifier)
        else:
            self.modifiers.add(modifier)

    def mouse_event(self, button: MouseButton, action: Action) -> None:
        """Record whether a mouse button is held down."""
        if action is Action.PRESS:
            self.buttons.add(MouseButton(button))
        else:
            self.buttons.discard(MouseButton(button))

    def reset_input(self) -> None:
        """Forget all pressed mouse buttons and modifier keys."""
        self.buttons.clear()
        self.modifiers.clear()

    # queries

    @property
    def left_mouse_pressed(self) -> bool:
        return MouseButton.LEFT in self.buttons

    @property
    def right_mouse_pressed(self) -> bool:
        return MouseButton.RIGHT in self.buttons

    @property
    def middle_mouse_pressed(self) -> bool:
        return MouseButton.MIDDLE in self.buttons

    @property
    def ctrl_pressed(self) -> bool:
        return Modifier.CTRL in self.modifiers

    @property
    def shift_pressed(self) -> bool:
        return Modifier.SHIFT in self.modifiers

    @property
    def alt_pressed(self) -> bool:
        return Modifier.ALT in self.modifiers

    # GUI and window

    def toggle_gui(self) -> bool:
        """Show or hide the GUI; return the new visibility."""
        self.show_gui = not self.show_gui
        return self.show_gui

    def scale_gui(self, scale: float) -> float:
        """Multiply the GUI scale by ``scale``; return the new scale."""
        if scale <= 0:
            raise ValueError("GUI scale factor must be positive")
        self.gui_scale *= scale
        return self.gui_scale

    def resize(self, width: int, height: int) -> None:
        """Record a new framebuffer size."""
        if width < 0 or height < 0:
            raise ValueError("window size must not be negative")
        self.width = width
        self.height = height

    def next_screenshot_name(self) -> str:
        """Return the file name for the next screenshot and advance the counter."""
        name = f"{self.title}{self.screenshot_number}"
        self.screenshot_number += 1
        return name