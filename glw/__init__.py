"""glw - pick the right commit range for gitlint, locally and in CI."""

__version__ = "0.1.0"
