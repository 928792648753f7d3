import logging
import pytest
from pydantic import ValidationError
from app.config.settings import Settings
from app.infrastructure.config.logging_config import setup_logging, get_logger, ROOT_LOGGER_NAME


class TestSettings:
    """Tests para la configuracion"""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEMO_TITLE", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_TO_FILE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.demo_title == "The Unit of Work Design Pattern in Python."
        assert settings.log_level == "INFO"
        assert settings.log_to_file is False

    @pytest.mark.unit
    def test_environment_overrides(self, monkeypatch):
        """Test que las variables de entorno sobreescriben los valores por defecto"""
        monkeypatch.setenv("DEMO_TITLE", "Custom title")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.demo_title == "Custom title"
        assert settings.log_level == "DEBUG"

    @pytest.mark.unit
    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")

        assert Settings(_env_file=None).log_level == "WARNING"

    @pytest.mark.unit
    def test_invalid_log_level_is_rejected(self, monkeypatch):
        """Test que un nivel de log desconocido falla al cargar la configuracion"""
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLoggingConfig:
    """Tests para setup_logging y get_logger"""

    @pytest.mark.unit
    def test_setup_logging_sets_level_and_console_handler(self):
        logger = setup_logging("DEBUG")

        assert logger.name == ROOT_LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    @pytest.mark.unit
    def test_setup_logging_is_idempotent(self):
        """Test que llamar dos veces no duplica handlers"""
        setup_logging("INFO")
        logger = setup_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    @pytest.mark.unit
    def test_setup_logging_writes_to_file(self, tmp_path):
        log_dir = tmp_path / "logs"

        logger = setup_logging("INFO", log_to_file=True, log_dir=str(log_dir))
        logger.info("file message")
        for handler in logger.handlers:
            handler.flush()

        files = list(log_dir.glob("app_*.log"))
        assert len(files) == 1
        assert "file message" in files[0].read_text(encoding="utf-8")

    @pytest.mark.unit
    def test_setup_logging_creates_nested_log_dir(self, tmp_path):
        """Test que el directorio de logs se crea aunque falten directorios padre"""
        log_dir = tmp_path / "a" / "b"

        logger = setup_logging("INFO", log_to_file=True, log_dir=str(log_dir))
        logger.info("nested message")
        for handler in logger.handlers:
            handler.flush()

        files = list(log_dir.glob("app_*.log"))
        assert len(files) == 1
        assert "nested message" in files[0].read_text(encoding="utf-8")

    @pytest.mark.unit
    def test_handlers_from_previous_tests_are_removed(self):
        """Test que los handlers de consola y archivo de los tests anteriores no quedan en "app" """
        assert logging.getLogger(ROOT_LOGGER_NAME).handlers == []

    @pytest.mark.unit
    def test_console_handler_added_after_file_logging_test(self, capsys):
        """Test que setup_logging vuelve a agregar el handler de consola"""
        setup_logging("INFO")

        get_logger("demo").info("otra vez")

        assert capsys.readouterr().out == "otra vez\n"

    @pytest.mark.unit
    def test_get_logger_returns_children_of_app(self):
        assert get_logger().name == ROOT_LOGGER_NAME
        assert get_logger("demo").name == f"{ROOT_LOGGER_NAME}.demo"

    @pytest.mark.unit
    def test_module_loggers_use_console_handler(self, capsys):
        """Test que los loggers de los modulos escriben por el handler de "app" """
        setup_logging("INFO")

        logging.getLogger("app.infrastructure.repositories.user_repository_impl").info("hola")

        assert capsys.readouterr().out == "hola\n"
