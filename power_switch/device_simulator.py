#!/usr/bin/env python3
"""
device_simulator.py

This module implements the DeviceSimulator class which emulates the USB power
switch for testing without physical hardware. It stands in for the open
serial.Serial connection and keeps an internal output state so that switching
commands affect later status queries.

Behavior:
  - "PW=0" / "PW=1" switch the simulated output and answer "PW=<state>" then "OK".
  - "PW=?" answers "PW=<state>".
  - Any other line answers "ERROR".
  - Replies can be padded with trailing NUL bytes or an 'O', as some firmware does.
  - In silent mode the device never answers.
  - Raw replies can be scripted for scenario tests; they replace the firmware
    behavior while any remain.

Interface:
  Implements write(), flush(), readline(), close(), reset_input_buffer(),
  is_open and timeout, matching the parts of serial.Serial the
  command channel uses. readline() honors timeout the way pySerial does: with
  no complete line buffered it waits for the timeout and returns whatever is
  buffered, possibly nothing.

Usage Example:
    simulator = DeviceSimulator(config={"initial_state": True, "padding": "\\x00"})
    send_request(simulator, Command.INQUIRE)   # [Response.ON]
"""

import logging
import time
from typing import Any, Dict, List, Optional

import serial

from power_switch.protocols.switch_protocol import PREFIX, SUFFIX


class DeviceSimulator:
    """
    Simulates the power switch behind a serial-like connection.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = {
            "initial_state": False,   # output on (True) or off (False)
            "padding": "",            # appended to every reply line
            "silent": False,          # never answer
            "fail_writes": False,     # raise SerialException on write()
            "response_delay": 0.0,    # seconds before a reply becomes readable
        }
        self.config.update(config or {})
        self.state = bool(self.config["initial_state"])
        self.logger = logger or logging.getLogger("DeviceSimulator")
        self.timeout: Optional[float] = None
        self.is_open = True
        self.received: List[bytes] = []
        self._scripted: List[bytes] = []
        self._rx = bytearray()
        self._tx = bytearray()
        self._ready_at = 0.0

    def script_reply(self, data: bytes) -> None:
        """
        Queues raw bytes to send back after the next command line.
        """
        self._scripted.append(data)

    def write(self, data: bytes) -> int:
        if not self.is_open:
            raise serial.PortNotOpenError()
        if self.config["fail_writes"]:
            raise serial.SerialException("simulated write failure")
        self._rx.extend(data)
        while b"\n" in self._rx:
            line, _, rest = bytes(self._rx).partition(b"\n")
            self._rx = bytearray(rest)
            self.received.append(line + b"\n")
            self._handle_line(line.rstrip(b"\r").decode("ascii", errors="replace"))
        return len(data)

    def flush(self) -> None:
        pass

    def reset_input_buffer(self) -> None:
        self._tx.clear()

    def readline(self) -> bytes:
        if not self.is_open:
            raise serial.PortNotOpenError()
        wait = max(0.0, self._ready_at - time.monotonic())
        if wait:
            if self.timeout is not None and wait > self.timeout:
                time.sleep(self.timeout)
                return b""
            time.sleep(wait)
        index = self._tx.find(b"\n")
        if index >= 0:
            line = bytes(self._tx[:index + 1])
            del self._tx[:index + 1]
            return line
        if self.timeout:
            time.sleep(self.timeout)
        line = bytes(self._tx)
        self._tx.clear()
        return line

    def close(self) -> None:
        self.is_open = False
        self.logger.info("Simulated switch disconnected.")

    def _handle_line(self, line: str) -> None:
        self.logger.debug(f"Simulated switch received: {line!r}")
        if self._scripted:
            self._queue(self._scripted.pop(0))
            return
        if self.config["silent"]:
            return
        if line == PREFIX + "0":
            self.state = False
            self._reply(self._state_line(), "OK")
        elif line == PREFIX + "1":
            self.state = True
            self._reply(self._state_line(), "OK")
        elif line == PREFIX + "?":
            self._reply(self._state_line())
        else:
            self._reply("ERROR")

    def _state_line(self) -> str:
        return PREFIX + ("1" if self.state else "0")

    def _reply(self, *lines: str) -> None:
        padding = self.config["padding"]
        self._queue("".join(line + padding + SUFFIX for line in lines).encode("ascii"))

    def _queue(self, data: bytes) -> None:
        self._tx.extend(data)
        self._ready_at = time.monotonic() + self.config["response_delay"]
