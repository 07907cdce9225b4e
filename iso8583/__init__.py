"""ISO 8583 field encoders, message type indicators, message reports and EMV ICC data."""

__version__ = "0.1.0"