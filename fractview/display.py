"""An in-memory display: windows, event hooks and the event loop."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any

from .drawing import Surface
from .image import PixelFormat

LAST_EVENT = 36
_ALL_EVENTS = 0xFFFFFF


class EventType(IntEnum):
    """Event numbers, as used to index a window's hooks."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


class EventMask(IntFlag):
    """Masks selecting which events a window receives."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass(frozen=True)
class Event:
    """One event addressed to a window.

    ``close_request`` marks a client message asking the window to close.
    """

    type: int
    window: Window | None
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False


@dataclass(frozen=True)
class _Hook:
    func: Callable[..., Any]
    param: Any
    mask: int


class Window:
    """A fixed-size window with a drawing surface and event hooks."""

    def __init__(self, width: int, height: int, title: str, pixel_format: PixelFormat):
        self.surface = Surface(width, height, pixel_format)
        self.title = title
        self.min_size = (width, height)
        self.max_size = (width, height)
        self.hooks: dict[int, _Hook] = {}
        self.selected_mask = _ALL_EVENTS

    @property
    def width(self) -> int:
        return self.surface.width

    @property
    def height(self) -> int:
        return self.surface.height

    def hook(self, event_type: int, mask: int, func: Callable[..., Any], param: Any) -> None:
        """Call ``func`` for events of ``event_type``, selecting them with ``mask``."""
        if not 0 <= int(event_type) < LAST_EVENT:
            raise ValueError(f"event type {event_type} out of range")
        self.hooks[int(event_type)] = _Hook(func, param, int(mask))

    def key_hook(self, func: Callable[..., Any], param: Any) -> None:
        """Call ``func(keysym, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Callable[..., Any], param: Any) -> None:
        """Call ``func(button, x, y, param)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Callable[..., Any], param: Any) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def event_mask(self) -> int:
        """The union of the masks of all installed hooks."""
        mask = 0
        for hook in self.hooks.values():
            mask |= hook.mask
        return mask


_DEFAULT_MASKS = {
    15: (0x7C00, 0x03E0, 0x001F),
    16: (0xF800, 0x07E0, 0x001F),
    24: (0xFF0000, 0x00FF00, 0x0000FF),
    32: (0xFF0000, 0x00FF00, 0x0000FF),
}


def _shift_and_bits(mask: int) -> tuple[int, int]:
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def _format_for_depth(depth: int) -> PixelFormat:
    try:
        masks = _DEFAULT_MASKS[depth]
    except KeyError:
        raise ValueError(f"unsupported visual depth {depth}") from None
    (rs, rb), (gs, gb), (bs, bb) = (_shift_and_bits(mask) for mask in masks)
    return PixelFormat(depth, rs, rb, gs, gb, bs, bb)


class Display:
    """A connection to a screen holding windows and a queue of events."""

    def __init__(
        self,
        screen_width: int = 1920,
        screen_height: int = 1080,
        depth: int = 24,
        true_color: bool = True,
    ):
        if not true_color:
            raise RuntimeError("No TrueColor Visual available.")
        self.pixel_format = _format_for_depth(depth)
        self._screen = (screen_width, screen_height)
        self._windows: list[Window] = []
        self._queue: deque[Event] = deque()
        self._loop_hook: _Hook | None = None
        self._end_requested = False
        self.do_flush = True
        self.closed = False

    def __enter__(self) -> Display:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("display is closed")

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, newest first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of events waiting in the queue."""
        return len(self._queue)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window that cannot be resized; its first expose is queued."""
        self._check_open()
        window = Window(width, height, title, self.pixel_format)
        self._windows.insert(0, window)
        self._queue.append(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window``; events still queued for it are ignored."""
        self._check_open()
        if not any(open_window is window for open_window in self._windows):
            raise ValueError("window does not belong to this display")
        self._windows = [open_window for open_window in self._windows if open_window is not window]

    def post(self, event: Event) -> None:
        """Queue an event for delivery by :meth:`loop`."""
        self._check_open()
        self._queue.append(event)

    def flush_events(self) -> None:
        """Discard every pending event."""
        self._check_open()
        self._queue.clear()

    def set_loop_hook(self, func: Callable[..., Any] | None, param: Any) -> None:
        """Call ``func(param)`` each time the queue has been drained."""
        self._check_open()
        self._loop_hook = None if func is None else _Hook(func, param, 0)

    def end_loop(self) -> None:
        """Make :meth:`loop` return as soon as possible."""
        self._end_requested = True

    def screen_size(self) -> tuple[int, int]:
        """Width and height of the screen."""
        self._check_open()
        return self._screen

    def close(self) -> None:
        """Close the display and all its windows."""
        self._windows.clear()
        self._queue.clear()
        self.closed = True

    def _is_open(self, window: Window | None) -> bool:
        return window is not None and any(w is window for w in self._windows)

    def _dispatch(self, event: Event) -> None:
        window = event.window
        if not self._is_open(window):
            return
        assert window is not None
        if event.type == EventType.CLIENT_MESSAGE and event.close_request:
            destroy = window.hooks.get(EventType.DESTROY_NOTIFY)
            if destroy is not None:
                destroy.func(destroy.param)
            if not self._is_open(window):
                return
        if not 0 <= event.type < LAST_EVENT:
            return
        hook = window.hooks.get(int(event.type))
        if hook is None or event.type < EventType.KEY_PRESS:
            return
        if event.type in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            hook.func(event.keysym, hook.param)
        elif event.type in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            hook.func(event.button, event.x, event.y, hook.param)
        elif event.type == EventType.MOTION_NOTIFY:
            hook.func(event.x, event.y, hook.param)
        elif event.type == EventType.EXPOSE:
            if event.count == 0:
                hook.func(hook.param)
        else:
            hook.func(hook.param)

    def loop(self) -> None:
        """Deliver events to window hooks until no window is left or the loop ends.

        Without a loop hook the loop also returns once the queue is empty,
        since nothing else can produce events.
        """
        self._check_open()
        for window in self._windows:
            window.selected_mask = window.event_mask()
        self.do_flush = False
        while self._windows and not self._end_requested:
            while not self._end_requested and (self._loop_hook is None or self._queue):
                if not self._queue:
                    return
                self._dispatch(self._queue.popleft())
            if self._loop_hook is not None and not self.closed:
                self._loop_hook.func(self._loop_hook.param)