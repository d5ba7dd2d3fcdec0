import pytest

from vncproto.desktop_layout import DesktopLayout, DisplayLayout
from vncproto.rfbproto import Screen


def test_from_screen_copies_fields():
    screen = Screen(id=9, x=10, y=20, width=640, height=480, flags=1)
    layout = DisplayLayout.from_screen(screen)
    assert (layout.id, layout.x_pos, layout.y_pos, layout.width,
            layout.height) == (9, 10, 20, 640, 480)
    assert layout.display is None


def test_from_screen_after_wire_round_trip():
    screen = Screen(id=0xdeadbeef, x=1, y=2, width=3, height=4)
    layout = DisplayLayout.from_screen(Screen.unpack(screen.pack()))
    assert layout.id == 0xdeadbeef
    assert layout.width == 3


def test_display_lookup():
    first = DisplayLayout(1, 0, 0, 800, 600)
    second = DisplayLayout(2, 800, 0, 1024, 768)
    desktop = DesktopLayout(1824, 768, [first, second])
    assert desktop.display_count() == 2
    assert desktop.display_at(0) is first
    assert desktop.display_at(1) is second


@pytest.mark.parametrize("index", [2, 100, -1])
def test_display_out_of_range(index):
    desktop = DesktopLayout(100, 100, [DisplayLayout(1, 0, 0, 100, 100)])
    assert desktop.display_at(index) is None


def test_empty_layout():
    desktop = DesktopLayout(50, 60)
    assert desktop.display_count() == 0
    assert desktop.display_at(0) is None


def test_too_many_displays():
    displays = [DisplayLayout(i, 0, 0, 1, 1) for i in range(256)]
    with pytest.raises(ValueError):
        DesktopLayout(1, 1, displays)