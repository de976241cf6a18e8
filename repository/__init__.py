"""Whole-document JSON persistence for submodules."""

from .store import RepositoryError, SubmoduleRepository

__all__ = ["RepositoryError", "SubmoduleRepository"]
