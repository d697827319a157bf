"""Custom exceptions."""


class WebimgError(Exception):
    """Base exception for webimg."""

    pass


class ToolMissingError(WebimgError):
    """A mandatory external encoder is not installed."""

    def __init__(self, tool: str):
        super().__init__(f"{tool} is required but not installed")
        self.tool = tool


class InvalidInputError(WebimgError):
    """Input argument is missing, absent on disk, or not a PNG."""

    pass


class ConversionError(WebimgError):
    """A mandatory output could not be produced."""

    pass
