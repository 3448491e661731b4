"""
session.py

Runs the fixed startup sequence against the power switch: query the status,
switch the output off, then switch it back on.
"""

import time
from typing import Callable, List, Optional

from power_switch.communicator.command_channel import CommandChannel
from power_switch.config import STARTUP_SEQUENCE
from power_switch.models import Response


def format_responses(responses: List[Response]) -> str:
    """
    Formats a list of responses for display, e.g. "['off', 'ok']".
    """
    return str([r.value for r in responses])


def run_startup_sequence(channel: CommandChannel,
                         output: Callable[[str], None] = print,
                         sleep: Callable[[float], None] = time.sleep,
                         sequence: Optional[list] = None) -> List[List[Response]]:
    """
    Performs each exchange of the startup sequence, printing the results.

    Args:
        channel: The channel connected to the switch.
        output: Function that receives each line of output.
        sleep: Function used for the pause between exchanges.
        sequence: (command, heading, result label) tuples; defaults to
            STARTUP_SEQUENCE.

    Returns:
        The responses of every exchange, in order.

    Raises:
        PowerSwitchError: From the first exchange that fails.
    """
    sequence = sequence if sequence is not None else STARTUP_SEQUENCE
    results = []
    for i, (command, heading, label) in enumerate(sequence):
        if i > 0:
            sleep(channel.config.command_pause)
        output(heading)
        responses = channel.send_request(command)
        output(f"{label}: {format_responses(responses)}")
        results.append(responses)
    return results
