"""Asset discovery for bundled templates.

Locates the HTML templates shipped inside the pagewiki package.
"""

from importlib.resources import files
from pathlib import Path


def get_templates_dir() -> Path:
    """Return path to bundled page templates.

    Returns:
        Path to the templates directory containing view.html and edit.html.

    Raises:
        FileNotFoundError: If templates are not bundled.
    """
    templates = files("pagewiki").joinpath("templates")
    if not templates.is_dir():
        msg = "Bundled templates not found. Reinstall pagewiki or pass --templates-dir."
        raise FileNotFoundError(msg)
    return Path(str(templates))
