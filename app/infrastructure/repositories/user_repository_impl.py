import logging
from typing import List
from app.domain.repositories.user_repository import UserRepository
from app.domain.entities.user import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    Implementación en memoria del repositorio de usuarios.

    Una lista simula la tabla de la base de datos: conserva el orden de
    insercion y admite duplicados.
    """

    def __init__(self):
        self._users: List[User] = []

    def add(self, user: User) -> None:
        """Agrega un usuario al final de la lista."""
        if user is None:
            raise ValueError("user no puede ser None")

        self._users.append(user)

        logger.info(f"User '{user.name}' added to repository.")

    def get_all(self) -> List[User]:
        """Obtiene una copia de la lista de usuarios en orden de insercion."""
        return list(self._users)

    def count(self) -> int:
        return len(self._users)

    def __repr__(self) -> str:
        return f"<InMemoryUserRepository users={len(self._users)}>"
