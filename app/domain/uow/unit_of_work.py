"""
Unit of Work Pattern (Domain Layer).

Define la interfaz abstracta para el patrón Unit of Work.
La Unit of Work coordina el trabajo de uno o mas repositorios y
expone una unica operacion para confirmar los cambios.
"""

from abc import ABC, abstractmethod

from app.domain.repositories.user_repository import UserRepository


class UnitOfWork(ABC):
    """
    Interfaz abstracta para Unit of Work Pattern.

    Los servicios trabajan contra la Unit of Work en lugar de usar
    cada repositorio por separado. En una aplicacion real, save()
    persistiria en una sola transaccion todos los cambios hechos a
    traves de los repositorios.

    Ejemplo de uso:
        >>> uow.users.add(User(id=1, name="Alice"))
        >>> uow.users.add(User(id=2, name="Bob"))
        >>> uow.save()
    """

    @property
    @abstractmethod
    def users(self) -> UserRepository:
        """
        Repositorio de usuarios administrado por esta Unit of Work.

        Returns:
            UserRepository: Siempre la misma instancia
        """
        pass

    @abstractmethod
    def save(self) -> None:
        """
        Confirma todos los cambios realizados a traves de los repositorios.
        """
        pass
