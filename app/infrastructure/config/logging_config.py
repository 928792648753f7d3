"""
Configuración de logging para la demo de Unit of Work
Soporta logging a consola y, opcionalmente, a archivo
"""
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = "app"


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_dir: str = "logs"
) -> logging.Logger:
    """
    Configura el sistema de logging para la aplicación.

    Los modulos usan logging.getLogger(__name__), por lo que todos
    cuelgan del logger "app" y heredan sus handlers.

    Args:
        log_level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Si True, también escribe logs a archivo
        log_dir: Directorio para los archivos de log

    Returns:
        Logger configurado

    Examples:
        >>> logger = setup_logging("DEBUG")
        >>> logger.info("Aplicación iniciada")
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))

    if logger.handlers:
        return logger

    # La consola muestra solo el mensaje, igual que la salida de la demo
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(logging.Formatter(fmt='%(message)s'))
    logger.addHandler(console_handler)

    if log_to_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)

        log_filename = path / f"app_{datetime.now().strftime('%Y%m%d')}.log"

        file_handler = logging.FileHandler(log_filename, encoding='utf-8')
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s - [%(levelname)s] - %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Obtiene el logger configurado.

    Args:
        name: Nombre del logger (opcional)

    Returns:
        Logger configurado

    Examples:
        >>> logger = get_logger("demo")
        >>> logger.info("Mensaje de log")
    """
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(ROOT_LOGGER_NAME)
