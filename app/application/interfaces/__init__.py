"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    IAuthRepository,
    IBrandRepository,
    ICarRepository,
    ICityRepository,
    IColorRepository,
    IDriverRepository,
    IInscriptionRepository,
    IModelRepository,
    ITravelRepository,
    ITripRepository,
    IUserRepository,
    RepositorySet,
)

__all__ = [
    "IAuthRepository",
    "IBrandRepository",
    "ICarRepository",
    "ICityRepository",
    "IColorRepository",
    "IDriverRepository",
    "IInscriptionRepository",
    "IModelRepository",
    "ITravelRepository",
    "ITripRepository",
    "IUserRepository",
    "RepositorySet",
]
