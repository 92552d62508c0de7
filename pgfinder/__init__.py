"""PG Finder: paying-guest listing marketplace backend."""

__version__ = "1.0.0"
