"""Core type definitions."""

from enum import StrEnum
from typing import NewType

# Page identifier, already checked against the title alphabet
# Distinct from plain str so unchecked input can't reach the store
Title = NewType("Title", str)


class Operation(StrEnum):
    """Action requested on a page."""

    VIEW = "view"
    EDIT = "edit"
    SAVE = "save"
