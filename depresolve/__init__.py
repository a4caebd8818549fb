"""Layered, policy-driven resolution of local dependency artifacts."""

__version__ = "0.3.0"
