# src/iad/commands/__init__.py
from .SubmissionMode import SubmissionMode  # noqa: F401


__all__ = ["SubmissionMode"]
