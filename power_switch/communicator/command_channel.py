"""
command_channel.py

Implements the CommandChannel class, which performs a single request/response
exchange with the power switch over an already-open connection.

The switch never says how many lines a reply has, so the channel keeps reading
lines until a read hits the connection's timeout. That timeout marks the end
of the reply and is not an error.

The connection only needs the parts of the serial.Serial interface used here:
reset_input_buffer(), write(), flush(), readline() and a writable timeout
attribute.
"""

import logging
from typing import Iterator, List, Optional

import serial

from power_switch.config import SwitchConfig
from power_switch.exceptions import ReceiveError, ResponseError, SendError
from power_switch.models import Command, Response
from power_switch.protocols.switch_protocol import SwitchProtocol


class CommandChannel:
    """
    Sends commands to the power switch and collects its parsed replies.
    """

    def __init__(self, connection, config: Optional[SwitchConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initializes the CommandChannel.

        Args:
            connection: An open serial.Serial (or compatible) connection.
            config: Settings providing the read timeout.
            logger: Optional logger for debugging.
        """
        self.connection = connection
        self.config = config or SwitchConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.protocol = SwitchProtocol(logger=self.logger)

    def send_request(self, command: Command) -> List[Response]:
        """
        Sends one command and reads the reply until the line goes quiet.

        Args:
            command: The Command to send.

        Returns:
            The parsed responses in the order they were received. Empty if the
            switch did not answer before the timeout.

        Raises:
            SendError: If writing the command fails.
            ReceiveError: If reading from the connection fails.
            ResponseError: If a reply line is ERROR or unrecognized. Its
                index attribute holds the position of the offending line.
        """
        self._send(self.protocol.create_command(command))
        responses = []
        for index, line in enumerate(self._read_lines()):
            try:
                responses.append(self.protocol.parse_response(line))
            except ResponseError as e:
                e.index = index
                self.logger.debug(f"Exchange aborted: {e}")
                raise
        return responses

    def _send(self, data: bytes) -> None:
        self.logger.debug(f"Sending command: {data!r}")
        try:
            # Replies that arrived after an earlier exchange timed out are dropped.
            self.connection.reset_input_buffer()
            self.connection.write(data)
            self.connection.flush()
        except (serial.SerialException, OSError) as e:
            raise SendError(f"send request: {e}") from e

    def _read_lines(self) -> Iterator[str]:
        """
        Yields reply lines with their terminators removed.

        Stops when a read returns nothing within the timeout. A partial line
        cut off by the timeout is yielded as the last line.
        """
        self.connection.timeout = self.config.read_timeout
        while True:
            raw = self._readline()
            if not raw:
                return
            complete = raw.endswith(b"\n")
            if complete:
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            line = raw.decode("ascii", errors="replace")
            self.logger.debug(f"Received line: {line!r}")
            yield line
            if not complete:
                return

    def _readline(self) -> bytes:
        self.logger.debug("reading")
        try:
            return self.connection.readline()
        except (serial.SerialException, OSError) as e:
            raise ReceiveError(f"read response: {e}") from e
        finally:
            self.logger.debug("read")


def send_request(connection, command: Command,
                 config: Optional[SwitchConfig] = None,
                 logger: Optional[logging.Logger] = None) -> List[Response]:
    """
    Performs one exchange on the connection. See CommandChannel.send_request.
    """
    return CommandChannel(connection, config, logger).send_request(command)
