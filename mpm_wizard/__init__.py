"""mpm-wizard — interactive installer for the MathWorks Package Manager."""

__version__ = "2.0"
