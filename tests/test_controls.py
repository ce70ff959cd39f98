from unittest.mock import MagicMock

import pygame

from nokia_snake.controller import Command, GamePhase
from nokia_snake.controls import InputAdapter
from nokia_snake.grid import Direction


def test_keys_map_to_commands():
    keys = InputAdapter(MagicMock())
    assert keys.command_for(pygame.K_UP) is Command.MOVE_UP
    assert keys.command_for(pygame.K_a) is Command.MOVE_LEFT
    assert keys.command_for(pygame.K_SPACE) is Command.TOGGLE_PLAY
    assert keys.command_for(pygame.K_r) is Command.RESTART
    assert keys.command_for(pygame.K_q) is None


def test_handle_key_forwards_command():
    controller = MagicMock()
    controller.handle.return_value = True
    keys = InputAdapter(controller)

    assert keys.handle_key(pygame.K_DOWN) is True
    controller.handle.assert_called_once_with(Command.MOVE_DOWN)


def test_unmapped_key_is_ignored():
    controller = MagicMock()
    assert InputAdapter(controller).handle_key(pygame.K_F1) is False
    controller.handle.assert_not_called()


def test_space_then_arrow_steers_real_controller(controller):
    keys = InputAdapter(controller)
    keys.handle_key(pygame.K_RIGHT)
    assert controller.direction is Direction.NONE

    keys.handle_key(pygame.K_SPACE)
    keys.handle_key(pygame.K_RIGHT)
    assert controller.phase is GamePhase.RUNNING
    assert controller.direction is Direction.RIGHT
