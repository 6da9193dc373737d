from __future__ import annotations


class RestructureError(Exception):
    """Base class for errors raised while planning or executing tasks."""


class FrontmatterError(RestructureError):
    """The leading metadata block of a Markdown file could not be parsed."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ManifestError(RestructureError):
    """The task manifest is missing or does not hold a list of tasks."""
