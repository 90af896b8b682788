import io

import pytest

from ansigif.config import RenderConfig
from ansigif.engine import RenderedImage
from ansigif.exceptions import ConfigError
from ansigif.player import play
from ansigif.terminal import CLEAR_SCREEN


def make_image(delays=(10, 20)):
    image = RenderedImage.new(2, 2, frame_count=len(delays), config=RenderConfig(dithering="none"))
    for frame, delay in enumerate(delays):
        image.set_delay(frame, delay)
        image.set_at(frame, 0, 0, frame, frame, frame)
    return image


def test_single_loop_writes_every_frame_in_order():
    image = make_image()
    out = io.StringIO()
    sleeps = []
    written = play(image, out, loops=1, sleep=sleeps.append)
    assert written == 2
    assert sleeps == [0.1, 0.2]
    assert out.getvalue() == CLEAR_SCREEN + image.render(0) + CLEAR_SCREEN + image.render(1)


def test_frame_index_wraps_around():
    image = make_image()
    out = io.StringIO()
    sleeps = []
    assert play(image, out, loops=2, clear=False, sleep=sleeps.append) == 4
    assert sleeps == [0.1, 0.2, 0.1, 0.2]
    assert out.getvalue() == (image.render(0) + image.render(1)) * 2


def test_should_stop_ends_endless_playback():
    image = make_image()
    sleeps = []
    written = play(image, io.StringIO(), sleep=sleeps.append, should_stop=lambda: len(sleeps) >= 5)
    assert written == 5


class ClosedPipe(io.StringIO):
    def write(self, s):
        raise BrokenPipeError


def test_closed_output_stops_playback():
    assert play(make_image(), ClosedPipe(), sleep=lambda _: None) == 0


def test_negative_loops_rejected():
    with pytest.raises(ConfigError):
        play(make_image(), io.StringIO(), loops=-1, sleep=lambda _: None)
