"""vgx — detect AI-generated source code from style and idiom signals."""

__version__ = "2.0.0"
