"""NYC Tax - Federal, NY State and NYC tax and budget calculator."""

__version__ = "0.1.0"
