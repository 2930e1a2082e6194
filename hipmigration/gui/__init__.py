"""PySide6 front end for the migration percentage measurement."""
