from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.enums import FetchStatus


class Character(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True, extra="ignore")

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    status: str
    species: str
    image_ref: str = Field(alias="image")


class CharacterPage(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    results: list[Character]

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "CharacterPage":
        seen: set[int] = set()
        for character in self.results:
            if character.id in seen:
                raise ValueError(f"Duplicate character id in page: {character.id}")
            seen.add(character.id)
        return self


class CharacterResponse(BaseModel):
    id: int
    name: str
    status: str
    species: str
    image_ref: str

    @classmethod
    def from_character(cls, character: Character) -> "CharacterResponse":
        return cls(
            id=character.id,
            name=character.name,
            status=character.status,
            species=character.species,
            image_ref=character.image_ref,
        )


class CharacterListResponse(BaseModel):
    status: FetchStatus
    count: int
    characters: list[CharacterResponse]
    error: str | None = None


class RefreshResponse(BaseModel):
    status: FetchStatus
    accepted: bool


class HealthResponse(BaseModel):
    status: str
    fetch_status: FetchStatus
    timestamp: datetime
