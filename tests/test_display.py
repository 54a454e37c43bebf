import random

import pytest

from fractview.display import Display, Event, EventMask, EventType
from fractview.image import PixelFormat


def test_new_window_properties_and_order():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == (second, first)
    assert (first.width, first.height, first.title) == (300, 300, "win1")
    assert first.min_size == first.max_size == (300, 300)
    assert display.pending == 2


def test_hook_helpers_store_masks():
    display = Display()
    window = display.new_window(10, 10, "w")
    window.key_hook(print, None)
    window.mouse_hook(print, None)
    window.expose_hook(print, None)
    assert window.hooks[EventType.KEY_RELEASE].mask == EventMask.KEY_RELEASE
    assert window.hooks[EventType.BUTTON_PRESS].mask == EventMask.BUTTON_PRESS
    assert window.event_mask() == (
        EventMask.KEY_RELEASE | EventMask.BUTTON_PRESS | EventMask.EXPOSURE
    )


def test_hook_rejects_bad_event_type():
    window = Display().new_window(10, 10, "w")
    with pytest.raises(ValueError):
        window.hook(36, 0, print, None)


def test_loop_dispatches_arguments():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls = []
    window.hook(EventType.KEY_PRESS, EventMask.KEY_PRESS, lambda k, p: calls.append(("key", k, p)), "a")
    window.mouse_hook(lambda b, x, y, p: calls.append(("mouse", b, x, y, p)), "b")
    window.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION,
                lambda x, y, p: calls.append(("move", x, y, p)), "c")
    window.expose_hook(lambda p: calls.append(("expose", p)), "d")
    display.post(Event(EventType.KEY_PRESS, window, keysym=0xFF1B))
    display.post(Event(EventType.BUTTON_PRESS, window, button=1, x=5, y=6))
    display.post(Event(EventType.MOTION_NOTIFY, window, x=3, y=4))
    display.post(Event(EventType.EXPOSE, window, count=2))
    display.loop()
    assert calls == [
        ("expose", "d"),
        ("key", 0xFF1B, "a"),
        ("mouse", 1, 5, 6, "b"),
        ("move", 3, 4, "c"),
    ]
    assert window.selected_mask == window.event_mask()
    assert display.pending == 0


def test_close_request_calls_destroy_hook():
    display = Display()
    window = display.new_window(10, 10, "w")
    closed = []
    window.hook(EventType.DESTROY_NOTIFY, EventMask.STRUCTURE_NOTIFY, closed.append, "bye")
    display.post(Event(EventType.CLIENT_MESSAGE, window, close_request=True))
    display.loop()
    assert closed == ["bye"]


def test_loop_hook_and_end_loop():
    display = Display()
    window = display.new_window(10, 10, "w")
    ticks = []

    def tick(param):
        ticks.append(param)
        if len(ticks) == 3:
            display.end_loop()

    display.set_loop_hook(tick, "t")
    display.loop()
    assert ticks == ["t", "t", "t"]
    assert display.windows == (window,)
    assert display.pending == 0


def test_events_for_destroyed_window_are_ignored():
    display = Display()
    window = display.new_window(10, 10, "w")
    other = display.new_window(10, 10, "o")
    calls = []
    window.mouse_hook(lambda *args: calls.append(args), None)
    display.destroy_window(window)
    display.post(Event(EventType.BUTTON_PRESS, window, button=1))
    display.loop()
    assert calls == []
    assert display.windows == (other,)


def test_new_win_mouse_replaces_window():
    rng = random.Random(7)
    display = Display()
    state = {}

    def on_mouse(button, x, y, param):
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(rng.randrange(1, 500), rng.randrange(1, 500), "new win")
        state["win1"].mouse_hook(on_mouse, None)

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    original = state["win1"]
    original.mouse_hook(on_mouse, None)
    win2.mouse_hook(on_mouse, None)
    display.post(Event(EventType.BUTTON_PRESS, original, button=1, x=10, y=10))
    display.loop()
    assert len(display.windows) == 2
    assert all(w is not original for w in display.windows)
    assert state["win1"].title == "new win"
    assert EventType.BUTTON_PRESS in state["win1"].hooks


def test_destroy_unknown_window_raises():
    display = Display()
    window = display.new_window(10, 10, "w")
    display.destroy_window(window)
    with pytest.raises(ValueError):
        display.destroy_window(window)


def test_flush_events_discards_queue():
    display = Display()
    display.new_window(10, 10, "w")
    display.flush_events()
    assert display.pending == 0


def test_screen_size():
    assert Display(screen_width=800, screen_height=600).screen_size() == (800, 600)


def test_depth_16_pixel_format():
    display = Display(depth=16)
    assert display.pixel_format == PixelFormat(16, 11, 5, 5, 6, 0, 5)
    window = display.new_window(4, 4, "w")
    window.surface.pixel_put(0, 0, 0xFFFFFF)
    assert window.surface.get_pixel(0, 0) == 0xFFFF


def test_bad_visuals_raise():
    with pytest.raises(ValueError):
        Display(depth=8)
    with pytest.raises(RuntimeError):
        Display(true_color=False)


def test_closed_display_rejects_use():
    with Display() as display:
        display.new_window(10, 10, "w")
    assert display.closed is True
    assert display.windows == ()
    with pytest.raises(RuntimeError):
        display.new_window(10, 10, "w")