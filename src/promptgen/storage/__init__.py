# Makes the folder importable as a package.

from .repository import PromptRecord, PromptRepository

__all__ = ["PromptRecord", "PromptRepository"]
