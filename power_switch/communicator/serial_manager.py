#!/usr/bin/env python3
"""
serial_manager.py

Opens the serial port for the power switch. The port is configured with the
switch's baud rate and framing, and with a read timeout so that a silent
device ends a reply instead of blocking forever.

Usage Example:
    from power_switch.communicator.serial_manager import open_port
    ser = open_port("/dev/tty.usbmodem002E1E6204511", SwitchConfig())
"""

import logging
from typing import Optional

import serial

from power_switch.config import SwitchConfig
from power_switch.exceptions import ConnectionOpenError


def open_port(port: str, config: Optional[SwitchConfig] = None,
              logger: Optional[logging.Logger] = None) -> serial.Serial:
    """
    Configures and returns a serial.Serial object for the power switch.

    Args:
        port (str): Serial port (e.g., "COM3" or "/dev/tty.usbmodem...").
        config (SwitchConfig): Serial settings; defaults apply when omitted.
        logger (Optional[logging.Logger]): Logger instance.

    Returns:
        serial.Serial: An open serial port.

    Raises:
        ConnectionOpenError: If the port cannot be opened.
    """
    config = config or SwitchConfig()
    logger = logger or logging.getLogger(__name__)
    try:
        ser = serial.Serial(port=port, **config.serial_settings())
    except (serial.SerialException, OSError) as e:
        raise ConnectionOpenError(f"open {port}: {e}") from e
    logger.info(f"Connected to power switch on {port} at {config.baudrate} baud")
    return ser
