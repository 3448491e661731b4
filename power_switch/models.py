"""
models.py

Defines the commands the power switch accepts and the responses it can send back.
"""

from enum import Enum, IntEnum


class Command(IntEnum):
    """
    Commands that can be sent to the power switch.
    """
    TURN_OFF = 0
    TURN_ON = 1
    INQUIRE = 2

    @property
    def code(self) -> str:
        """The single-character wire code for this command."""
        return wire_code(self)

    @classmethod
    def from_code(cls, code: str) -> "Command":
        """
        Re-derives a command from its wire code.

        Args:
            code: A wire code as produced by wire_code().

        Returns:
            The command that encodes to the given code.

        Raises:
            ValueError: If no command encodes to the code.
        """
        for command in cls:
            if command.code == code:
                return command
        raise ValueError(f"Unknown command code: {code!r}")


# Only the two switching commands have a documented code; everything else,
# INQUIRE included, goes out as "?".
WIRE_CODES = {
    Command.TURN_OFF: "0",
    Command.TURN_ON: "1",
}
FALLBACK_CODE = "?"


def wire_code(command: int) -> str:
    """
    Returns the wire code for a command value, "?" for anything unrecognized.
    """
    return WIRE_CODES.get(command, FALLBACK_CODE)


class Response(Enum):
    """
    Replies the power switch can send. The value is the display label.
    """
    OFF = "off"
    ON = "on"
    OK = "ok"

    def __str__(self) -> str:
        return self.value
