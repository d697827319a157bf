"""webimg - PNG to web-delivery image variants."""

__version__ = "0.1.0"
