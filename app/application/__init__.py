"""Application layer: DTOs and repository interfaces.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (plain and cached repositories).
"""

from app.application.interfaces import RepositorySet

__all__ = ["RepositorySet"]
