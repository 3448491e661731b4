"""
port_selector.py

Finds the serial port the power switch is attached to by looking for its
USB serial-number fragment in the port names reported by the OS.
"""

import logging
from typing import Iterable, List, Optional

import serial
from serial.tools import list_ports as serial_list_ports

from power_switch.config import SwitchConfig
from power_switch.exceptions import PortNotFoundError

_logger = logging.getLogger(__name__)


def list_ports() -> List[str]:
    """
    Lists available serial ports.

    Returns:
        A list of available port names, in the order the OS reports them.

    Raises:
        PortNotFoundError: If the OS port list cannot be read.
    """
    try:
        return [p.device for p in serial_list_ports.comports()]
    except (serial.SerialException, OSError) as e:
        raise PortNotFoundError(f"get ports list: {e}") from e


def select_port(ports: Iterable[str], match: str,
                logger: Optional[logging.Logger] = None) -> str:
    """
    Picks the first port whose name contains the device substring.

    Args:
        ports: Port names to examine.
        match: Substring identifying the switch (e.g., a USB serial number).
        logger: Optional logger; every examined port is logged.

    Returns:
        The first matching port name.

    Raises:
        PortNotFoundError: If no port name contains the substring.
    """
    log = logger or _logger
    for port in ports:
        log.info(f"Found port: {port!r}")
        if match in port:
            return port
    raise PortNotFoundError("the target port is not found")


def find_port(config: Optional[SwitchConfig] = None,
              logger: Optional[logging.Logger] = None) -> str:
    """
    Enumerates the system's serial ports and selects the power switch.
    """
    config = config or SwitchConfig()
    return select_port(list_ports(), config.port_match, logger)
