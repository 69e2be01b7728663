"""Time-step simulation of a physiotherapy clinic's patients, waiting lists and resources."""

__version__ = "0.1.0"