"""
Unit tests for the startup sequence and the process entry point

Tests session.py and main.py against the simulated switch
"""

import unittest
from unittest import mock
import main
from power_switch.communicator.command_channel import CommandChannel
from power_switch.config import SwitchConfig
from power_switch.device_simulator import DeviceSimulator
from power_switch.exceptions import ConnectionOpenError, DeviceReportedError, PortNotFoundError
from power_switch.models import Response
from power_switch.session import format_responses, run_startup_sequence


class TestStartupSequence(unittest.TestCase):
    """Test the status/off/on sequence"""

    def setUp(self):
        self.config = SwitchConfig(read_timeout=0.02, command_pause=2.0)
        self.simulator = DeviceSimulator(config={"initial_state": True})
        self.channel = CommandChannel(self.simulator, self.config)
        self.lines = []
        self.pauses = []

    def run_sequence(self):
        return run_startup_sequence(self.channel, output=self.lines.append,
                                    sleep=self.pauses.append)

    def test_commands_sent_in_order(self):
        self.run_sequence()
        self.assertEqual(self.simulator.received, [b"PW=?\r\n", b"PW=0\r\n", b"PW=1\r\n"])

    def test_output(self):
        results = self.run_sequence()

        self.assertEqual(results, [
            [Response.ON],
            [Response.OFF, Response.OK],
            [Response.ON, Response.OK],
        ])
        self.assertEqual(self.lines, [
            "get status",
            "got status: ['on']",
            "turn off",
            "got response: ['off', 'ok']",
            "turn on",
            "got response: ['on', 'ok']",
        ])

    def test_pause_between_exchanges(self):
        self.run_sequence()
        self.assertEqual(self.pauses, [2.0, 2.0])

    def test_first_error_stops_sequence(self):
        """Test that a failing exchange ends the sequence immediately"""
        self.simulator.script_reply(b"ERROR\r\n")

        with self.assertRaises(DeviceReportedError):
            self.run_sequence()
        self.assertEqual(self.lines, ["get status"])
        self.assertEqual(len(self.simulator.received), 1)

    def test_format_empty(self):
        self.assertEqual(format_responses([]), "[]")


class TestMain(unittest.TestCase):
    """Test the process entry point"""

    @mock.patch("main.run_startup_sequence")
    @mock.patch("main.open_port")
    @mock.patch("main.find_port", return_value="/dev/tty.usbmodem002E1E6204511")
    def test_port_closed_after_run(self, find_port, open_port, run_sequence):
        main.main()

        open_port.assert_called_once()
        self.assertEqual(open_port.call_args.args[0], "/dev/tty.usbmodem002E1E6204511")
        run_sequence.assert_called_once()
        open_port.return_value.close.assert_called_once_with()

    @mock.patch("main.run_startup_sequence", side_effect=DeviceReportedError("ERROR", 0))
    @mock.patch("main.open_port")
    @mock.patch("main.find_port", return_value="COM3")
    def test_exchange_error_is_fatal(self, find_port, open_port, run_sequence):
        with self.assertRaises(SystemExit) as ctx:
            main.main()
        self.assertEqual(ctx.exception.code, 1)
        open_port.return_value.close.assert_called_once_with()

    @mock.patch("main.open_port")
    @mock.patch("main.find_port", side_effect=PortNotFoundError("the target port is not found"))
    def test_missing_port_is_fatal(self, find_port, open_port):
        with self.assertRaises(SystemExit) as ctx:
            main.main()
        self.assertEqual(ctx.exception.code, 1)
        open_port.assert_not_called()

    @mock.patch("main.open_port", side_effect=ConnectionOpenError("open COM3: busy"))
    @mock.patch("main.find_port", return_value="COM3")
    def test_open_error_is_fatal(self, find_port, open_port):
        with self.assertRaises(SystemExit) as ctx:
            main.main()
        self.assertEqual(ctx.exception.code, 1)


if __name__ == '__main__':
    unittest.main()
