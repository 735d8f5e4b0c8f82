"""Application DTOs (no ORM dependency)."""

from app.application.dtos.auth import AuthCreate, AuthResult, RegisteredUser
from app.application.dtos.brand import BrandCreate, BrandResult
from app.application.dtos.car import CarCreate, CarResult, CarUpdate
from app.application.dtos.city import CityCreate, CityResult
from app.application.dtos.color import ColorCreate, ColorResult, ColorUpdate
from app.application.dtos.common import PageResult, SkipTake
from app.application.dtos.driver import DriverCreate, DriverResult
from app.application.dtos.inscription import InscriptionCreate, InscriptionResult
from app.application.dtos.model import ModelCreate, ModelResult
from app.application.dtos.travel import TravelCreate, TravelFilters, TravelResult
from app.application.dtos.trip import TripCreate, TripFilters, TripResult
from app.application.dtos.user import UserCreate, UserResult, UserUpdate

__all__ = [
    "AuthCreate",
    "AuthResult",
    "BrandCreate",
    "BrandResult",
    "CarCreate",
    "CarResult",
    "CarUpdate",
    "CityCreate",
    "CityResult",
    "ColorCreate",
    "ColorResult",
    "ColorUpdate",
    "DriverCreate",
    "DriverResult",
    "InscriptionCreate",
    "InscriptionResult",
    "ModelCreate",
    "ModelResult",
    "PageResult",
    "RegisteredUser",
    "SkipTake",
    "TravelCreate",
    "TravelFilters",
    "TravelResult",
    "TripCreate",
    "TripFilters",
    "TripResult",
    "UserCreate",
    "UserResult",
    "UserUpdate",
]
