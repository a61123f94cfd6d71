"""TOS Checker backend: cached, chunked LLM analysis of terms-and-conditions text."""

__version__ = "0.1.0"
