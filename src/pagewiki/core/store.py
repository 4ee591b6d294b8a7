"""File-based page storage.

Storage layout:
    <pages_dir>/
    ├── FrontPage.txt      # Raw page body
    └── Test.txt

Each page lives in its own file named after its title. Files are written
with owner-only permissions (0600).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from pagewiki.core.titles import is_valid_title, validate_title
from pagewiki.core.types import Title
from pagewiki.errors import PageNotFoundError, PageReadError, StorageError

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".txt"
PAGE_MODE = 0o600


@dataclass
class Page:
    """A wiki page: title plus raw body bytes."""

    title: Title
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")


class PageStore:
    """Loads and saves pages as ``<title>.txt`` files.

    Writes go to a temporary file in the same directory and are then
    moved over the target, so readers see either the old or the new body.
    There is no locking; concurrent saves to one title are last-writer-wins.
    """

    def __init__(self, pages_dir: Path) -> None:
        """Initialize store.

        Args:
            pages_dir: Directory holding the page files
        """
        self._pages_dir = pages_dir

    @property
    def pages_dir(self) -> Path:
        """Directory holding the page files."""
        return self._pages_dir

    def path_for(self, title: str) -> Path:
        """Return the backing file path for a title.

        Raises:
            InvalidTitleError: If title is not alphanumeric
        """
        return self._pages_dir / f"{validate_title(title)}{PAGE_SUFFIX}"

    def load(self, title: str) -> Page:
        """Read a page from storage.

        Args:
            title: Page title

        Returns:
            Page with the full file contents as body

        Raises:
            PageNotFoundError: If no file exists for the title
            PageReadError: If the file exists but can't be read
        """
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError as e:
            raise PageNotFoundError(title, "no such page") from e
        except OSError as e:
            raise PageReadError(title, e.strerror or str(e)) from e
        return Page(title=Title(title), body=body)

    def save(self, page: Page) -> None:
        """Write a page to storage, creating or replacing its file.

        Args:
            page: Page to store

        Raises:
            StorageError: If the file can't be written
        """
        path = self.path_for(page.title)
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._pages_dir,
                prefix=f".{page.title}.",
                suffix=".tmp",
            )
        except OSError as e:
            raise StorageError(f"open {path}: {e.strerror or e}") from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
            os.chmod(tmp_name, PAGE_MODE)
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"write {path}: {e.strerror or e}") from e

        logger.info(f"Saved page {page.title} ({len(page.body)} bytes)")

    def titles(self) -> list[Title]:
        """List titles of all stored pages, sorted.

        Files whose stem isn't a valid title are skipped.
        """
        if not self._pages_dir.is_dir():
            return []
        return sorted(
            Title(path.stem)
            for path in self._pages_dir.glob(f"*{PAGE_SUFFIX}")
            if path.is_file() and is_valid_title(path.stem)
        )
