"""
User models for the airport operations simulator.

A user is a single model tagged with a role. Frequent flyers and flight
managers carry a role-specific profile; the capability predicates at the
bottom of this module are the only place role behaviour is decided.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator

from .enums import UserRole


class FrequentFlyerProfile(BaseModel):
    """Loyalty programme membership of a frequent flyer."""
    model_config = ConfigDict(validate_assignment=True)

    ff_number: str = Field(..., description="Frequent flyer number")
    points: int = Field(default=0, ge=0, description="Current points balance")


class ManagerProfile(BaseModel):
    """Staff details of a flight manager."""

    staff_id: str = Field(..., description="Staff identifier")


class UserModel(BaseModel):
    """
    Registered user of any role.

    The role-specific profile must match the role tag: frequent flyers carry a
    FrequentFlyerProfile, flight managers a ManagerProfile, travellers neither.
    """
    model_config = ConfigDict(validate_assignment=True)

    role: UserRole
    name: str = Field(..., description="Full name")
    age: int = Field(..., ge=0, description="Age in years")
    email: str = Field(..., description="Login email, unique ignoring case")
    mobile: str = Field(..., description="Mobile phone number")
    password_hash: str = Field(..., repr=False, exclude=True, description="SHA-256 hex digest")
    frequent_flyer: Optional[FrequentFlyerProfile] = None
    manager: Optional[ManagerProfile] = None

    @model_validator(mode="after")
    def check_role_profile(self) -> "UserModel":
        """Reject a profile that does not belong to the role."""
        wants_ff = self.role == UserRole.FREQUENT_FLYER
        wants_manager = self.role == UserRole.FLIGHT_MANAGER
        if wants_ff != (self.frequent_flyer is not None):
            raise ValueError(f"{self.role.value} users {'need' if wants_ff else 'cannot have'} a frequent flyer profile")
        if wants_manager != (self.manager is not None):
            raise ValueError(f"{self.role.value} users {'need' if wants_manager else 'cannot have'} a manager profile")
        return self

    @property
    def points(self) -> int:
        return self.frequent_flyer.points if self.frequent_flyer else 0


def has_displacement_privilege(user: UserModel) -> bool:
    """Frequent flyers may take a seat that another traveller holds."""
    return user.role == UserRole.FREQUENT_FLYER


def earns_points(user: UserModel) -> bool:
    return user.role == UserRole.FREQUENT_FLYER


def is_flight_manager(user: Optional[UserModel]) -> bool:
    return user is not None and user.role == UserRole.FLIGHT_MANAGER
