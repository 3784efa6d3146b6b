"""Host-side building blocks for LoRaWAN sensor node firmware.

The package covers polling, logging, dates, 24-bit float encoding, app-info
blocks, LED patterns, timers, a pulse totalizer, line editing, and FRAM
field text codecs.
"""

__version__ = "0.1.0"

__all__ = [
    "appinfo",
    "date",
    "framformat",
    "framparse",
    "led",
    "linecollector",
    "log",
    "polling",
    "sflt24",
    "timer",
    "totalizer",
]