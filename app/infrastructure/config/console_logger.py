"""
Console Logger para la salida visible de la demo
Banner, separadores y mensajes de cierre van directo a stdout
"""
from enum import Enum


class LogLevel(Enum):
    """Códigos ANSI para colores en consola"""
    SUCCESS = '\033[92m'
    RESET = '\033[0m'


class ConsoleLogger:
    """
    Logger que SIEMPRE muestra en consola, sin pasar por logging.
    Los mensajes de los repositorios usan logging; este se usa para
    la estructura de la salida (banner y cierre).

    Examples:
        >>> from app.infrastructure.config.console_logger import ConsoleLogger as log
        >>> log.separator("-", 42)
        >>> log.line("The Unit of Work Design Pattern in Python.")
        >>> log.success("Done.")
    """

    @staticmethod
    def _colorize(level: LogLevel, message: str) -> str:
        return f"{level.value}{message}{LogLevel.RESET.value}"

    @staticmethod
    def line(message: str = "") -> None:
        """
        Imprime un mensaje tal cual, sin color

        Args:
            message: Mensaje a mostrar
        """
        print(message)

    @staticmethod
    def success(message: str) -> None:
        """Mensaje de éxito (color verde brillante)"""
        print(ConsoleLogger._colorize(LogLevel.SUCCESS, message))

    @staticmethod
    def separator(char: str = "-", length: int = 42) -> None:
        """
        Imprime un separador visual

        Args:
            char: Carácter para el separador
            length: Longitud del separador
        """
        print(char * length)
