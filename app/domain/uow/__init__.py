"""
Unit of Work Pattern (Domain Layer).

Define la interfaz para el patrón Unit of Work que coordina
los repositorios de la aplicacion.
"""

from app.domain.uow.unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
