"""
Unit of Work Implementations (Infrastructure Layer).

Implementaciones concretas del patrón Unit of Work.
"""

from app.infrastructure.uow.in_memory_unit_of_work import InMemoryUnitOfWork

__all__ = ["InMemoryUnitOfWork"]
