"""
Bundled plugins.

Each plugin can be named in configuration by its import path:

- ``hwio.plugins.mock:MockPlugin``: in-memory simulation
- ``hwio.plugins.rpigpio:RPiGPIOPlugin``: RPi.GPIO digital I/O
- ``hwio.plugins.smbus:SMBusPlugin``: smbus2 I2C
"""

DEFAULT_PLUGINS = [
    "hwio.plugins.mock:MockPlugin",
    "hwio.plugins.rpigpio:RPiGPIOPlugin",
    "hwio.plugins.smbus:SMBusPlugin",
]
