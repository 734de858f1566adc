"""Sophon: universe monitor that turns significant state changes into Telegram alerts."""

__version__ = "0.3.0"
