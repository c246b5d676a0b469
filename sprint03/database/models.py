"""SQLAlchemy database models for Sprint03."""

from sqlalchemy import Column, Date, Integer, String

from sprint03.database.database import Base


class NomeUsuarioDB(Base):
    """Database model for NomeUsuario."""

    __tablename__ = "nome_usuarios"

    # Primary key, assigned by the database on insert
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Profile
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone_number = Column(String, nullable=True)
    birth_date = Column(Date, nullable=False)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from sprint03.models.nome_usuario import NomeUsuario
        return NomeUsuario(
            id=self.id,
            name=self.name,
            email=self.email,
            phone_number=self.phone_number,
            birth_date=self.birth_date,
        )

    @classmethod
    def from_pydantic(cls, payload):
        """Create database model from Pydantic model.

        The id is left unset so the database assigns one.
        """
        return cls(
            name=payload.name,
            email=payload.email,
            phone_number=payload.phone_number,
            birth_date=payload.birth_date,
        )

    def apply(self, user) -> None:
        """Overwrite every non-id column from a Pydantic model."""
        self.name = user.name
        self.email = user.email
        self.phone_number = user.phone_number
        self.birth_date = user.birth_date
