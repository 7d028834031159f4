"""Player models.

Field names are snake_case in Python; every field also carries the camelCase
alias used by the roster JSON document (``firstName``, ``shortName``, ...).
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Country(BaseModel):
    """Country a player represents."""

    code: str = Field(..., min_length=1, description="Country code (e.g., 'SUI')")
    picture: str | None = Field(None, description="Flag picture URI or path")


class PlayerData(BaseModel):
    """Ranking and physical data attached to a player."""

    rank: int = Field(..., description="Ranking position (lower is better)")
    points: int = Field(default=0, ge=0, description="Ranking points")
    weight: int = Field(default=0, description="Weight in grams")
    height: int = Field(default=0, description="Height in centimeters")
    age: int = Field(default=0, ge=0, description="Age in years")
    last: list[int] = Field(
        default_factory=list, description="Recent match outcomes (1 = win, 0 = loss)"
    )

    @field_validator("last", mode="before")
    @classmethod
    def validate_last(cls, v: Any) -> Any:
        """Treat a missing outcome list as empty and reject flags other than 0/1."""
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            return v
        for flag in v:
            if flag not in (0, 1):
                raise ValueError(f"match outcome flags must be 0 or 1, got {flag!r}")
        return v

    def wins(self) -> int:
        """Number of recorded wins."""
        return sum(1 for flag in self.last if flag == 1)


class PlayerBase(BaseModel):
    """Base player model."""

    first_name: str = Field(..., min_length=1, alias="firstName", description="First name")
    last_name: str = Field(..., min_length=1, alias="lastName", description="Last name")
    short_name: str | None = Field(None, alias="shortName", description="Short name (e.g., 'R.FED')")
    sex: str = Field(..., description="Sex")
    country: Country = Field(..., description="Country represented")
    picture: str | None = Field(None, description="Player picture URI or path")
    data: PlayerData = Field(..., description="Ranking and physical data")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    def to_document(self) -> dict[str, Any]:
        """Serialize with the camelCase keys of the roster document."""
        return self.model_dump(mode="json", by_alias=True)


class PlayerCreate(PlayerBase):
    """Model for creating or replacing a player.

    ``id`` is accepted so that full player documents validate, but it is never
    trusted: the store assigns ids on create and update pins the target id.
    """

    id: int | None = Field(None, description="Ignored on create and update")

    def to_player(self, player_id: int) -> "Player":
        """Build the stored player carrying ``player_id``."""
        return Player(id=player_id, **self.model_dump(exclude={"id"}))


class Player(PlayerBase):
    """Complete player model."""

    id: int = Field(..., ge=1, description="System-assigned player ID")

    class Config:
        """Pydantic configuration."""

        from_attributes = True
        populate_by_name = True
