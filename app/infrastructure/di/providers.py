"""
Dependency Injection Providers.

This module defines provider functions for the repository and Unit of Work
dependencies. Callers depend on the domain interfaces; the providers decide
which implementation is used.
"""

from app.domain.repositories.user_repository import UserRepository
from app.domain.uow.unit_of_work import UnitOfWork
from app.infrastructure.repositories.user_repository_impl import InMemoryUserRepository
from app.infrastructure.uow.in_memory_unit_of_work import InMemoryUnitOfWork


def get_user_repository() -> UserRepository:
    """
    Provider for UserRepository.

    Returns:
        UserRepository implementation
    """
    return InMemoryUserRepository()


def get_unit_of_work() -> UnitOfWork:
    """
    Provider for UnitOfWork.

    Each call returns a new Unit of Work owning its own repository.

    Returns:
        UnitOfWork implementation
    """
    return InMemoryUnitOfWork(users=get_user_repository())
