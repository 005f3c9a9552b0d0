import pytest

from blockfall.options_menu import HoverButton, VolumeSlider, slider_volume


def test_slider_volume_clamps_low():
    assert slider_volume(10_000, 100, 200) == 0.0


def test_slider_volume_clamps_high():
    assert slider_volume(-10_000, 100, 200) == 1.0


def test_slider_volume_decreases_downwards():
    values = [slider_volume(y, 100, 200) for y in range(80, 320, 10)]
    assert values == sorted(values, reverse=True)
    assert all(0.0 <= v <= 1.0 for v in values)


def test_button_starts_at_min_size():
    button = HoverButton(60, 80)
    assert button.size == 60
    assert button.hovered is False


def test_button_grows_to_max_while_hovered():
    button = HoverButton(60, 80)
    sizes = []
    for _ in range(10):
        button.update(True, False)
        sizes.append(button.size)
    assert sizes == sorted(sizes)
    assert sizes[-1] == 80
    assert max(sizes) == 80


def test_button_shrinks_to_min_after_leaving():
    button = HoverButton(60, 80)
    for _ in range(10):
        button.update(True, False)
    for _ in range(10):
        button.update(False, False)
    assert button.size == 60
    assert button.hovered is False


def test_hover_callback_fires_once_per_entry():
    calls = []
    button = HoverButton(60, 80, on_hover=lambda: calls.append(1))
    button.update(True, False)
    button.update(True, False)
    assert len(calls) == 1
    button.update(False, False)
    button.update(True, False)
    assert len(calls) == 2


def test_click_only_counts_when_hovered():
    calls = []
    button = HoverButton(60, 80, on_hover=lambda: calls.append(1))
    assert button.update(False, True) is False
    assert calls == []
    assert button.update(True, True) is True
    assert len(calls) == 2


def test_button_rejects_inverted_sizes():
    with pytest.raises(ValueError):
        HoverButton(80, 60)


def test_slider_ignores_mouse_outside():
    changes = []
    slider = VolumeSlider(100, 200, on_change=changes.append)
    assert slider.update(False, 150, True, True, False) is None
    assert changes == []


def test_slider_drag_reports_volume():
    changes = []
    slider = VolumeSlider(100, 200, on_change=changes.append)
    volume = slider.update(True, 150, True, True, False)
    assert volume == slider_volume(150, 100, 200)
    assert changes == [volume]
    assert slider.dragging is True


def test_slider_keeps_dragging_outside_until_release():
    changes = []
    slider = VolumeSlider(100, 200, on_change=changes.append)
    slider.update(True, 150, True, True, False)
    volume = slider.update(False, -10_000, False, True, False)
    assert volume == 1.0
    assert slider.hovered is True
    slider.update(False, -10_000, False, False, True)
    assert slider.dragging is False
    assert slider.update(False, 150, False, True, False) is None
    assert slider.hovered is False


def test_slider_hover_without_press_changes_nothing():
    hovers = []
    changes = []
    slider = VolumeSlider(
        100, 200, on_hover=lambda: hovers.append(1), on_change=changes.append
    )
    assert slider.update(True, 150, False, True, False) is None
    assert hovers == [1]
    assert changes == []