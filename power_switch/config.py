"""
config.py

Holds the default serial and protocol settings for the power switch, the fixed
startup command sequence, and the logging setup shared by the application.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import serial

from power_switch.models import Command

# Hardware serial-number fragment that identifies the switch's USB port.
DEFAULT_PORT_MATCH = "usbmodem002E1E6204511"
DEFAULT_BAUDRATE = 115200
# Seconds without data after which a reply is considered complete.
DEFAULT_READ_TIMEOUT = 5.0
# Seconds to wait between the exchanges of the startup sequence.
DEFAULT_COMMAND_PAUSE = 2.0

# Commands issued on startup, in order, with the heading printed before each
# and the label used when printing its result.
STARTUP_SEQUENCE = [
    (Command.INQUIRE, "get status", "got status"),
    (Command.TURN_OFF, "turn off", "got response"),
    (Command.TURN_ON, "turn on", "got response"),
]


@dataclass
class SwitchConfig:
    """
    Settings for locating, opening and talking to the power switch.

    Attributes:
        port_match: Substring a port name must contain to be selected.
        baudrate: Serial baud rate.
        bytesize: Number of data bits.
        parity: Parity setting.
        stopbits: Number of stop bits.
        read_timeout: Read deadline in seconds; hitting it ends a reply.
        write_timeout: Write deadline in seconds, None to block.
        command_pause: Pause in seconds between startup exchanges.
    """
    port_match: str = DEFAULT_PORT_MATCH
    baudrate: int = DEFAULT_BAUDRATE
    bytesize: int = serial.EIGHTBITS
    parity: str = serial.PARITY_NONE
    stopbits: float = serial.STOPBITS_ONE
    read_timeout: float = DEFAULT_READ_TIMEOUT
    write_timeout: Optional[float] = None
    command_pause: float = DEFAULT_COMMAND_PAUSE

    def serial_settings(self) -> dict:
        """
        Returns the keyword arguments for opening a serial.Serial port.
        """
        return {
            'baudrate': self.baudrate,
            'bytesize': self.bytesize,
            'parity': self.parity,
            'stopbits': self.stopbits,
            'timeout': self.read_timeout,
            'write_timeout': self.write_timeout,
        }


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(name: str, level: int = logging.INFO, stream=None) -> logging.Logger:
    """
    Configures the application logger with a single console handler.

    The logger itself records everything; the handler level decides what is
    shown. Wire traffic is logged at DEBUG, so pass level=logging.DEBUG to
    watch the exchanges with the switch.

    Args:
        name: Logger name.
        level: Level of the console handler.
        stream: Stream to write to; stderr when omitted, keeping stdout for results.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler(stream)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)
    return logger
