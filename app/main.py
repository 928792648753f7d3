from typing import Optional
from app.config.settings import settings
from app.domain.entities.user import User
from app.domain.uow.unit_of_work import UnitOfWork
from app.infrastructure.di.providers import get_unit_of_work
from app.infrastructure.config.logging_config import setup_logging, get_logger
from app.infrastructure.config.console_logger import ConsoleLogger as log

logger = get_logger("demo")


def run_demo(unit_of_work: Optional[UnitOfWork] = None) -> UnitOfWork:
    """
    Ejecuta la demo: dos usuarios agregados y un commit.

    Args:
        unit_of_work: Unit of Work a usar (opcional, por defecto la del provider)

    Returns:
        UnitOfWork: La Unit of Work usada, para inspeccionar su estado
    """
    log.separator("-", len(settings.demo_title))
    log.line(settings.demo_title)
    log.separator("-", len(settings.demo_title))
    log.line()

    if unit_of_work is None:
        unit_of_work = get_unit_of_work()

    # Se usa la Unit of Work en lugar de cada repositorio por separado
    unit_of_work.users.add(User(id=1, name="Alice"))
    unit_of_work.users.add(User(id=2, name="Bob"))

    log.line()

    # En una aplicacion real, aqui se confirman todos los cambios en una transaccion
    unit_of_work.save()
    users = [user.to_dict() for user in unit_of_work.users.get_all()]
    logger.debug(f"[DEMO] Usuarios en el repositorio: {users}")

    log.line()
    log.success("Done.")

    return unit_of_work


def main() -> int:
    setup_logging(
        log_level=settings.log_level,
        log_to_file=settings.log_to_file,
        log_dir=settings.log_dir
    )
    run_demo()
    return 0
