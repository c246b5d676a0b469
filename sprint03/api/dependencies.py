"""FastAPI dependencies for the Sprint03 API."""

from fastapi import Depends
from sqlalchemy.orm import Session

from sprint03.database.database import get_db
from sprint03.database.nome_usuario_repository import NomeUsuarioRepository, NomeUsuarioStore


def get_nome_usuario_repository(db: Session = Depends(get_db)) -> NomeUsuarioStore:
    """Build the user store around the request-scoped session.

    Override this dependency to run the endpoints against a different store.
    """
    return NomeUsuarioRepository(db)
