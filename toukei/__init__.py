"""toukei: language definitions for source-code statistics."""

__version__ = "0.1.0"
