"""Phi Emergence Service — golden-ratio emergence scoring with pluggable LLM providers."""

__version__ = "1.0.0"
