"""
exceptions.py

Error types raised while locating, opening and talking to the power switch.
Timeouts are not represented here: a read timeout ends a reply normally.
"""

from typing import Optional


class PowerSwitchError(Exception):
    """Base class for all power switch errors."""


class PortNotFoundError(PowerSwitchError):
    """No serial port matched the expected device substring."""


class ConnectionOpenError(PowerSwitchError):
    """The serial port could not be opened."""


class SendError(PowerSwitchError):
    """Writing a command line to the connection failed."""


class ReceiveError(PowerSwitchError):
    """Reading from the connection failed."""


class ResponseError(PowerSwitchError):
    """
    A reply line could not be turned into a Response.

    Attributes:
        line: The offending line as received.
        index: 0-based position of the line within its exchange, once known.
    """

    def __init__(self, message: str, line: str, index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"parse response at {self.index}: {self.message}"


class DeviceReportedError(ResponseError):
    """The device answered ERROR."""

    def __init__(self, line: str, index: Optional[int] = None):
        super().__init__("got error response", line, index)


class InvalidResponseError(ResponseError):
    """The device answered something that is not a known reply."""

    def __init__(self, line: str, index: Optional[int] = None):
        super().__init__(f"invalid response: {line!r}", line, index)
