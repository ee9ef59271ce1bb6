# gridpath/core/errors.py
#!/usr/bin/env python3


class SearchError(Exception):
    """A search that cannot produce a result. The message is shown to the user."""

    default_message = "Search failed"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class MissingEndpoints(SearchError):
    default_message = "Please place both start and end nodes!"


class NoPathFound(SearchError):
    default_message = "No path found!"
