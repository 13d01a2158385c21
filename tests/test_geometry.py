"""Tests for mars_rover.geometry."""

from __future__ import annotations

import pytest

from mars_rover.geometry import offset, rotate, step
from mars_rover.models import Command, Heading


@pytest.mark.parametrize(
    ("heading", "left", "right"),
    [
        (Heading.N, Heading.W, Heading.E),
        (Heading.S, Heading.E, Heading.W),
        (Heading.E, Heading.N, Heading.S),
        (Heading.W, Heading.S, Heading.N),
    ],
)
def test_rotation_table(heading: Heading, left: Heading, right: Heading) -> None:
    assert rotate(heading, Command.LEFT) == left
    assert rotate(heading, Command.RIGHT) == right


@pytest.mark.parametrize("heading", list(Heading))
def test_left_then_right_is_identity(heading: Heading) -> None:
    assert rotate(rotate(heading, Command.LEFT), Command.RIGHT) == heading
    assert rotate(rotate(heading, Command.RIGHT), Command.LEFT) == heading


@pytest.mark.parametrize("heading", list(Heading))
def test_four_turns_come_full_circle(heading: Heading) -> None:
    h = heading
    for _ in range(4):
        h = rotate(h, Command.RIGHT)
    assert h == heading


@pytest.mark.parametrize("heading", list(Heading))
def test_backward_negates_forward(heading: Heading) -> None:
    dr, dc = offset(heading, forward=True)
    assert offset(heading, forward=False) == (-dr, -dc)
    assert abs(dr) + abs(dc) == 1


def test_north_moves_towards_row_zero() -> None:
    assert step((2, 2), Heading.N) == (1, 2)
    assert step((2, 2), Heading.N, forward=False) == (3, 2)
    assert step((2, 2), Heading.E) == (2, 3)
    assert step((2, 2), Heading.W) == (2, 1)
