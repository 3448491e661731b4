"""
power_switch

Drives a USB-serial power switch: finds its port, sends PW= commands and
parses the line-oriented replies.
"""

from power_switch.config import SwitchConfig
from power_switch.models import Command, Response
from power_switch.communicator.command_channel import CommandChannel, send_request
from power_switch.communicator.port_selector import find_port, select_port

__all__ = [
    'SwitchConfig',
    'Command',
    'Response',
    'CommandChannel',
    'send_request',
    'find_port',
    'select_port',
]
