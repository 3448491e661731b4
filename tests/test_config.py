"""
Unit tests for configuration defaults and logging setup

Tests config.py
"""

import io
import logging
import unittest
from power_switch.config import SwitchConfig, setup_logging


class TestSwitchConfig(unittest.TestCase):
    """Test configuration defaults"""

    def test_defaults(self):
        config = SwitchConfig()
        self.assertEqual(config.port_match, "usbmodem002E1E6204511")
        self.assertEqual(config.baudrate, 115200)
        self.assertEqual(config.read_timeout, 5.0)
        self.assertEqual(config.command_pause, 2.0)


class TestSetupLogging(unittest.TestCase):
    """Test the console logging setup"""

    def setUp(self):
        self.stream = io.StringIO()

    def test_info_hides_wire_traffic(self):
        """Test that the default level shows INFO but not DEBUG messages"""
        logger = setup_logging("PowerSwitchTestInfo", stream=self.stream)
        logger.debug("Sending command: b'PW=?\\r\\n'")
        logger.info("Found port: 'COM3'")

        output = self.stream.getvalue()
        self.assertIn("INFO - Found port: 'COM3'", output)
        self.assertNotIn("Sending command", output)

    def test_debug_level_shows_wire_traffic(self):
        logger = setup_logging("PowerSwitchTestDebug", level=logging.DEBUG, stream=self.stream)
        logger.debug("Received line: 'OK'")
        self.assertIn("DEBUG - Received line: 'OK'", self.stream.getvalue())

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging("PowerSwitchTestRepeat", stream=self.stream)
        logger = setup_logging("PowerSwitchTestRepeat", stream=self.stream)
        self.assertEqual(len(logger.handlers), 1)


if __name__ == '__main__':
    unittest.main()
