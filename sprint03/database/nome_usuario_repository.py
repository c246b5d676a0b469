"""Repository for NomeUsuario database operations."""

import logging
from typing import List, Protocol
from sqlalchemy.orm import Session

from sprint03.models.nome_usuario import NomeUsuario, NomeUsuarioPayload
from sprint03.models.lookup import Found, NotFound, Lookup
from sprint03.database.models import NomeUsuarioDB

logger = logging.getLogger(__name__)


class NomeUsuarioStore(Protocol):
    """Storage operations the NomeUsuario endpoints depend on."""

    def get_all(self) -> List[NomeUsuario]: ...

    def get(self, user_id: int) -> Lookup[NomeUsuario]: ...

    def create(self, payload: NomeUsuarioPayload) -> NomeUsuario: ...

    def update(self, user: NomeUsuario) -> NomeUsuario: ...

    def delete(self, user_id: int) -> bool: ...


class NomeUsuarioRepository:
    """Repository for NomeUsuario database operations."""

    def __init__(self, db: Session):
        self.db = db

    def _row(self, user_id: int):
        return self.db.query(NomeUsuarioDB).filter(NomeUsuarioDB.id == user_id).first()

    def get_all(self) -> List[NomeUsuario]:
        """Get all users (storage-defined order)."""
        users_db = self.db.query(NomeUsuarioDB).all()
        return [user_db.to_pydantic() for user_db in users_db]

    def get(self, user_id: int) -> Lookup[NomeUsuario]:
        """Get user by ID."""
        user_db = self._row(user_id)
        if user_db is None:
            return NotFound(user_id)
        return Found(user_db.to_pydantic())

    def create(self, payload: NomeUsuarioPayload) -> NomeUsuario:
        """Create a new user; the database assigns its id."""
        try:
            user_db = NomeUsuarioDB.from_pydantic(payload)
            self.db.add(user_db)
            self.db.commit()
            self.db.refresh(user_db)
            logger.debug(f"Created user {user_db.id}: {user_db.email}")
            return user_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create user {payload.email}: {type(e).__name__}: {str(e)}")
            raise

    def update(self, user: NomeUsuario) -> NomeUsuario:
        """Overwrite all fields of an existing user.

        Callers check existence first; a row that disappeared in between raises ValueError.
        """
        user_db = self._row(user.id)
        if not user_db:
            raise ValueError(f"User {user.id} not found")

        user_db.apply(user)

        try:
            self.db.commit()
            self.db.refresh(user_db)
            logger.debug(f"Updated user {user.id}: {user.email}")
            return user_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update user {user.id}: {type(e).__name__}: {str(e)}")
            raise

    def delete(self, user_id: int) -> bool:
        """Permanently delete a user by ID."""
        user_db = self._row(user_id)
        if not user_db:
            return False

        try:
            self.db.delete(user_db)
            self.db.commit()
            logger.debug(f"Deleted user {user_id}")
            return True
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete user {user_id}: {type(e).__name__}: {str(e)}")
            raise
