"""Server-side proxy for LLM-backed Japanese word lookups."""

__version__ = "0.1.0"
