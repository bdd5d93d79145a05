"""Majin: compare completions from several LLM providers side by side."""

__version__ = "0.1.0"
