"""Render Markdown reference pages from .NET metadata and XML documentation."""

__version__ = "0.4.0"
