"""
In-Memory Unit of Work Implementation (Infrastructure Layer).

Implementación concreta del patrón Unit of Work sobre repositorios en memoria.
No hay base de datos detras: save() simula el commit.
"""

from typing import Optional
import logging
from app.domain.uow.unit_of_work import UnitOfWork
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.user_repository_impl import InMemoryUserRepository

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Implementación del patrón Unit of Work en memoria.

    Crea y posee un unico repositorio de usuarios durante toda su vida.
    El repositorio no se puede reemplazar ni compartir con otra Unit of Work.

    Atributos:
        users: Repository para User

    Ejemplo de uso:
        >>> uow = InMemoryUnitOfWork()
        >>> uow.users.add(User(id=1, name="Alice"))
        >>> uow.save()  # Commit simulado
    """

    def __init__(self, users: Optional[UserRepository] = None):
        """
        Inicializa la Unit of Work con su repositorio.

        Args:
            users: Repositorio a usar (opcional, por defecto uno nuevo en memoria)
        """
        self._users = users if users is not None else InMemoryUserRepository()
        logger.debug("[UOW] Unit of Work inicializado")

    @property
    def users(self) -> UserRepository:
        return self._users

    def save(self) -> None:
        """
        Simula el commit de todos los cambios.

        No persiste nada ni modifica el repositorio; siempre tiene exito.
        """
        logger.debug(f"[UOW] Commit simulado con {self._users.count()} usuarios")
        logger.info("All changes have been saved (simulated commit).")

    def __repr__(self) -> str:
        return f"<InMemoryUnitOfWork users={self._users.count()}>"
