"""Ports - interfaces/protocols for external dependencies."""

from .repository import Repository
from .remote_source import RemoteURLSource

__all__ = [
    "Repository",
    "RemoteURLSource",
]
