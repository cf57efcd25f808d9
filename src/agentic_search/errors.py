class SearchToolError(Exception):
    """Base error for the search tool."""


class SearchConfigError(SearchToolError):
    """Raised when the tool is created without the credentials it needs."""


class SearchTransportError(SearchToolError):
    """Raised when the search endpoint cannot be reached or returns an unreadable body."""
