"""Exception hierarchy for pagewiki."""


class WikiError(Exception):
    """Base class for all pagewiki errors."""


class InvalidPathError(WikiError):
    """Request path does not name a known operation and a valid title."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid page path: {path!r}")
        self.path = path


class InvalidTitleError(WikiError, ValueError):
    """Title contains characters outside the allowed alphabet."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Invalid page title: {title!r}")
        self.title = title


class PageLoadError(WikiError):
    """Page could not be read from storage."""

    def __init__(self, title: str, reason: str) -> None:
        super().__init__(f"Cannot load page {title!r}: {reason}")
        self.title = title


class PageNotFoundError(PageLoadError):
    """No stored page exists for the title."""


class PageReadError(PageLoadError):
    """Stored page exists but could not be read (permissions, I/O)."""


class StorageError(WikiError):
    """Page could not be written to storage."""


class TemplateLoadError(WikiError):
    """Templates could not be loaded at startup."""


class RenderError(WikiError):
    """Template rendering failed."""
