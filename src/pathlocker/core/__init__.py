"""Core path declaration and resolution for pathlocker."""
