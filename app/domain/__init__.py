"""Domain layer: business errors.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import CovoitException, DomainError

__all__ = ["CovoitException", "DomainError"]
