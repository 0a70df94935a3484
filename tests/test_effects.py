import math

import pytest

from ledfx.effects import Effect, PulsingEffect, SolidEffect

COLOR = (0.2, 0.6, 1.0)


def test_effect_is_abstract():
    with pytest.raises(TypeError):
        Effect()


def test_solid_fills_every_led():
    frame = SolidEffect().assemble_frame(1.3, 5, COLOR)
    assert frame == [COLOR] * 5


def test_solid_zero_leds():
    assert SolidEffect().assemble_frame(0.0, 0, COLOR) == []


def test_pulsing_peak_is_full_color():
    frame = PulsingEffect().assemble_frame(math.pi / 2, 3, COLOR)
    assert len(frame) == 3
    for led in frame:
        assert led == pytest.approx(COLOR)


def test_pulsing_trough_is_black():
    frame = PulsingEffect().assemble_frame(3 * math.pi / 2, 4, COLOR)
    for led in frame:
        assert led == pytest.approx((0.0, 0.0, 0.0))


@pytest.mark.parametrize("phase", [0.0, 0.7, 2.0, 4.5, 6.0])
def test_pulsing_stays_within_color(phase):
    frame = PulsingEffect().assemble_frame(phase, 2, COLOR)
    for led in frame:
        for channel, full in zip(led, COLOR):
            assert 0.0 <= channel <= full + 1e-12


def test_pulsing_all_leds_equal():
    frame = PulsingEffect().assemble_frame(1.0, 6, COLOR)
    assert len(set(frame)) == 1