"""User profile (NomeUsuario) data models for Sprint03."""

from datetime import date
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field


def _accepts(camel: str, snake: str) -> AliasChoices:
    """Request keys accepted for a field: camelCase, PascalCase and the attribute name."""
    return AliasChoices(camel, camel[0].upper() + camel[1:], snake)


class NomeUsuarioPayload(BaseModel):
    """Client-supplied user fields (everything except the storage-assigned id).

    Keys are read in camelCase, PascalCase or snake_case and written in camelCase.
    Any `id` sent in a request body is ignored.
    """

    name: str = Field(..., validation_alias=_accepts("name", "name"), description="Full name")
    email: str = Field(..., validation_alias=_accepts("email", "email"), description="Email address")
    phone_number: Optional[str] = Field(
        None,
        validation_alias=_accepts("phoneNumber", "phone_number"),
        serialization_alias="phoneNumber",
        description="Phone number, stored as text",
    )
    birth_date: date = Field(
        ...,
        validation_alias=_accepts("birthDate", "birth_date"),
        serialization_alias="birthDate",
        description="Birth date (ISO 8601)",
    )

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class NomeUsuario(NomeUsuarioPayload):
    """Persisted user profile.

    Instances are immutable snapshots of a row; writing changes back requires an
    explicit repository call with the full field set.
    """

    id: int = Field(..., validation_alias=AliasChoices("id", "Id"), description="Storage-assigned identifier")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        frozen = True

    def with_fields(self, payload: NomeUsuarioPayload) -> "NomeUsuario":
        """Return a copy carrying this id and every non-id field from `payload`."""
        return NomeUsuario(
            id=self.id,
            name=payload.name,
            email=payload.email,
            phone_number=payload.phone_number,
            birth_date=payload.birth_date,
        )
