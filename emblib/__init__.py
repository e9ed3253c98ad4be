"""Bounded containers, filters, controllers, motor-control math, scheduling, state machines and redundant EEPROM storage."""

__version__ = "0.1.0"