class SlideRestoreError(Exception):
    """Base class for errors raised by slide_restore."""


class ConfigurationError(SlideRestoreError):
    pass


class MalformedJsonError(SlideRestoreError, ValueError):
    """The model response could not be parsed as a JSON object after sanitizing."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text
