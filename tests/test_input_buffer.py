"""Tests for the key-press queue and direction resolution."""

import pytest

from wrapsnake.geometry import Direction
from wrapsnake.input_buffer import InputBuffer, resolve_direction

UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


class TestResolveDirection:
    """resolve_direction(current, queue)."""

    @pytest.mark.parametrize("current", list(Direction))
    def test_empty_queue_keeps_direction(self, current):
        assert resolve_direction(current, []) == (current, [])

    def test_drops_reversal(self):
        assert resolve_direction(UP, [DOWN, LEFT]) == (LEFT, [])

    def test_drops_repeats(self):
        assert resolve_direction(RIGHT, [RIGHT, RIGHT, UP]) == (UP, [])

    def test_keeps_entries_after_first_turn(self):
        assert resolve_direction(RIGHT, [LEFT, UP, LEFT, DOWN]) == (UP, [LEFT, DOWN])

    def test_only_noise_empties_queue(self):
        assert resolve_direction(LEFT, [RIGHT, LEFT, RIGHT]) == (LEFT, [])

    def test_does_not_mutate_input(self):
        queue = [DOWN, LEFT]
        resolve_direction(UP, queue)
        assert queue == [DOWN, LEFT]


class TestInputBuffer:
    """InputBuffer push/resolve and capacity."""

    def test_push_and_resolve(self):
        buf = InputBuffer(4)
        buf.push(DOWN)
        buf.push(LEFT)
        buf.push(UP)
        assert buf.resolve(UP) is LEFT
        assert list(buf) == [UP]

    def test_resolve_drains_when_nothing_applies(self):
        buf = InputBuffer(4, [RIGHT, LEFT])
        assert buf.resolve(RIGHT) is RIGHT
        assert len(buf) == 0

    def test_evicts_oldest_when_full(self):
        buf = InputBuffer(3)
        for d in [UP, LEFT, DOWN, RIGHT]:
            buf.push(d)
        assert list(buf) == [LEFT, DOWN, RIGHT]

    def test_capacity_kept_after_resolve(self):
        buf = InputBuffer(2, [UP, LEFT])
        buf.resolve(RIGHT)
        buf.push(DOWN)
        buf.push(RIGHT)
        buf.push(UP)
        assert list(buf) == [RIGHT, UP]

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            InputBuffer(0)
