"""Application factories."""

from lobby.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
