#!/usr/bin/env python3
"""
switch_protocol.py

Implements the ASCII line protocol spoken by the USB power switch.
Commands are sent as "PW=<code>\\r\\n"; the switch answers with one or more
lines, each one of "PW=0", "PW=1", "OK" or "ERROR".

Some firmware revisions pad their replies with trailing NUL bytes or a stray
'O', so those characters are trimmed before a line is matched.

Usage Example:
    protocol = SwitchProtocol()
    line = protocol.create_command(Command.TURN_ON)   # b"PW=1\\r\\n"
    response = protocol.parse_response("PW=1")      # Response.ON
"""

import logging
from typing import Optional

from power_switch.exceptions import DeviceReportedError, InvalidResponseError
from power_switch.models import Response, wire_code

PREFIX = "PW="
SUFFIX = "\r\n"
ERROR_REPLY = "ERROR"
# Firmware padding removed from the end of every reply line.
PADDING_CHARS = "\x00O"


class SwitchProtocol:
    """
    Builds command lines and parses reply lines for the power switch.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initializes the SwitchProtocol.

        Args:
            logger (Optional[logging.Logger]): Logger instance.
        """
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self._reply_defs = {}
        self._initialize_replies()

    def _initialize_replies(self) -> None:
        """
        Defines the reply lines the switch can send and what they mean.
        """
        self._reply_defs = {
            PREFIX + "0": Response.OFF,
            PREFIX + "1": Response.ON,
            "OK": Response.OK,
        }

    def encode(self, command: int) -> str:
        """
        Returns the text command line for a command, terminator included.
        """
        return PREFIX + wire_code(command) + SUFFIX

    def create_command(self, command: int) -> bytes:
        """
        Creates the ASCII command line for the switch.
        Format: "PW=<code>\\r\\n"

        Args:
            command: The Command to serialize.

        Returns:
            bytes: The ASCII-encoded command line.
        """
        line = self.encode(command)
        self.logger.debug(f"Created switch command: {line!r}")
        return line.encode("ascii")

    @staticmethod
    def trim(line: str) -> str:
        """
        Strips leading whitespace and trailing firmware padding from a reply line.
        """
        return line.lstrip().rstrip(PADDING_CHARS)

    def parse_response(self, line: str) -> Response:
        """
        Parses a single reply line, without its line terminator.

        Args:
            line (str): The reply line as received.

        Returns:
            Response: The parsed reply.

        Raises:
            DeviceReportedError: If the switch answered ERROR.
            InvalidResponseError: If the line is not a known reply.
        """
        trimmed = self.trim(line)
        response = self._reply_defs.get(trimmed)
        if response is not None:
            return response
        if trimmed == ERROR_REPLY:
            raise DeviceReportedError(line)
        raise InvalidResponseError(line)
