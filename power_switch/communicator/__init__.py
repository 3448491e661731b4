# power_switch/communicator/__init__.py
