# power_switch/protocols/__init__.py
from power_switch.protocols.switch_protocol import SwitchProtocol, PREFIX, SUFFIX
