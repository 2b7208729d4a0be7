"""Bit-field register models and enums for the MCF8316C-Q1 BLDC motor driver."""

__version__ = "0.1.0"