"""Telegram delivery channel for sophon alerts."""
