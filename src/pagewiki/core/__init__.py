"""Core wiki logic: titles, page storage and rendering."""
