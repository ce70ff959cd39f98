import pytest

from nokia_snake.grid import Direction
from nokia_snake.snake import Snake


def test_advance_does_not_mutate_body():
    snake = Snake([(5, 5), (4, 5)])
    assert snake.advance(Direction.RIGHT) == (6, 5)
    assert snake.body == ((5, 5), (4, 5))


def test_grow_then_shrink_translates():
    snake = Snake([(5, 5), (4, 5), (3, 5)])
    snake.grow_to(snake.advance(Direction.UP))
    snake.shrink()
    assert snake.body == ((5, 4), (5, 5), (4, 5))
    assert len(snake) == 3


def test_grow_without_shrink_adds_one():
    snake = Snake([(5, 5)])
    snake.grow_to((5, 6))
    assert snake.head() == (5, 6)
    assert len(snake) == 2


def test_occupies_checks_every_segment():
    snake = Snake([(5, 5), (5, 6), (5, 7)])
    assert snake.occupies((5, 7))
    assert not snake.occupies((6, 7))


def test_length_never_drops_below_one():
    snake = Snake([(1, 1)])
    with pytest.raises(ValueError):
        snake.shrink()
    with pytest.raises(ValueError):
        Snake([])
