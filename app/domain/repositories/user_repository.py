from abc import ABC, abstractmethod
from typing import List
from app.domain.entities.user import User


class UserRepository(ABC):
    """
    Interfaz para el repositorio de usuarios.

    Define las operaciones de acceso a datos para usuarios. Las
    implementaciones deciden donde viven los datos (memoria, base de datos).
    """

    @abstractmethod
    def add(self, user: User) -> None:
        """
        Agrega un usuario al repositorio.

        No se valida que el id sea unico: agregar dos veces el mismo
        usuario deja dos entradas.

        Args:
            user: Usuario a agregar

        Raises:
            ValueError: Si user es None
        """
        pass

    @abstractmethod
    def get_all(self) -> List[User]:
        """
        Obtiene todos los usuarios en el orden en que fueron agregados.

        Returns:
            List[User]: Lista con todos los usuarios (vacia si no hay ninguno)
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Numero de usuarios almacenados."""
        pass
