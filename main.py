#main.py
"""
Main entry point for the power switch controller.
Locates the switch, opens its port and runs the startup sequence:
query status, turn off, turn on.
"""

import sys                 # Imports sys to set the process exit status

from power_switch.communicator.command_channel import CommandChannel
from power_switch.communicator.port_selector import find_port
from power_switch.communicator.serial_manager import open_port
from power_switch.config import SwitchConfig, setup_logging
from power_switch.exceptions import PowerSwitchError
from power_switch.session import run_startup_sequence


def run(config: SwitchConfig, logger) -> None:
    """
    Finds and opens the switch, then performs the startup exchanges.
    The port is closed again before returning, even on failure.
    """
    port_name = find_port(config, logger)
    ser = open_port(port_name, config, logger)
    try:
        run_startup_sequence(CommandChannel(ser, config, logger))
    finally:
        ser.close()
        logger.info(f"Disconnected from {port_name}")


def main():
    """
    Starts the controller. Any error is fatal and exits with status 1.
    """
    logger = setup_logging("PowerSwitch")
    logger.info("Starting power switch controller")

    try:
        run(SwitchConfig(), logger)
    except PowerSwitchError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    # Entry point to run the main function
    main()
