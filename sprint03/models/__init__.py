"""Data models for Sprint03."""

from sprint03.models.nome_usuario import NomeUsuario, NomeUsuarioPayload
from sprint03.models.lookup import Found, NotFound, Lookup

__all__ = [
    "NomeUsuario",
    "NomeUsuarioPayload",
    "Found",
    "NotFound",
    "Lookup",
]
