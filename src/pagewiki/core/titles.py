"""Title validation and path parsing.

A single compiled pattern both routes requests and sanitizes titles. Titles
become file names, so anything outside ``[a-zA-Z0-9]`` is rejected before
a filesystem path is ever built.
"""

import re
from dataclasses import dataclass

from pagewiki.core.types import Operation, Title
from pagewiki.errors import InvalidPathError, InvalidTitleError

VALID_PATH = re.compile(r"^/(view|edit|save)/([a-zA-Z0-9]+)$")
VALID_TITLE = re.compile(r"^[a-zA-Z0-9]+$")


@dataclass(frozen=True)
class PathMatch:
    """Operation and title extracted from a request path."""

    operation: Operation
    title: Title


def parse_path(path: str) -> PathMatch:
    """Extract operation and title from a request path.

    Args:
        path: Decoded URL path, e.g. "/view/FrontPage"

    Returns:
        PathMatch with the operation and title

    Raises:
        InvalidPathError: If the path doesn't match ``/<operation>/<title>``
    """
    # fullmatch, since search with "$" still accepts a trailing newline
    match = VALID_PATH.fullmatch(path)
    if match is None:
        raise InvalidPathError(path)
    return PathMatch(operation=Operation(match.group(1)), title=Title(match.group(2)))


def is_valid_title(text: str) -> bool:
    return VALID_TITLE.fullmatch(text) is not None


def validate_title(text: str) -> Title:
    """Check a raw string against the title alphabet.

    Raises:
        InvalidTitleError: If text is empty or has disallowed characters
    """
    if not is_valid_title(text):
        raise InvalidTitleError(text)
    return Title(text)
