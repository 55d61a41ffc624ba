"""HR System backend: accounts, single-session auth and leave workflow."""

__version__ = "0.1.0"
