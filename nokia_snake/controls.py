"""
Keyboard mapping from pygame key codes to controller commands.
"""

import pygame

from .controller import Command

KEY_COMMANDS = {
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_w: Command.MOVE_UP,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_s: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_SPACE: Command.TOGGLE_PLAY,
    pygame.K_r: Command.RESTART,
}


class InputAdapter:
    def __init__(self, controller, key_commands=None):
        self.controller = controller
        self.key_commands = key_commands if key_commands is not None else KEY_COMMANDS

    def command_for(self, key):
        return self.key_commands.get(key)

    def handle_key(self, key):
        """Forward a key press to the controller; unmapped keys are ignored."""
        command = self.command_for(key)
        if command is None:
            return False
        return self.controller.handle(command)
