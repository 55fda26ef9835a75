"""A runner that verifies, runs and watches exercises, with worked solutions."""

__version__ = "0.1.0"