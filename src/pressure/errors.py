"""Error taxonomy for entry loading, page resolution and pagination"""


class PressError(Exception):
    """Base class for every error raised by pressure."""


class EntryIOError(PressError, OSError):
    """An entry file (or the posts folder) exists but could not be read."""


class ParseError(PressError, ValueError):
    """Front matter is not syntactically valid YAML."""


class FrontMatterTypeError(PressError, TypeError):
    """Front matter parsed, but the top-level value is not a mapping."""


class BadURL(PressError, ValueError):
    """A page path escapes the pages root or has an unsupported extension."""


class NotFound(PressError, LookupError):
    """No file exists at the resolved or constructed path."""


class PageOutOfRange(PressError, IndexError):
    """Index page number outside [1, page_count]."""


class ConfigError(PressError, ValueError):
    """The instance config file is missing, unreadable or invalid."""
