"""
Centralized logging configuration for CampusCoffee.
Provides component-specific loggers with separate log files.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import get_config


class ComponentLogger:
    """Manages component-specific logging with separate files."""

    _loggers: Dict[str, logging.Logger] = {}
    _initialized = False
    _log_dir: Optional[Path] = None

    # Component definitions with their log levels
    COMPONENTS = {
        'api': {'level': logging.INFO, 'file': 'api.log'},
        'database': {'level': logging.INFO, 'file': 'database.log'},
        'domain': {'level': logging.INFO, 'file': 'domain.log'},
        'main': {'level': logging.INFO, 'file': 'main.log'},
        'error': {'level': logging.ERROR, 'file': 'errors.log'},  # Centralized error log
    }

    DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s'

    @classmethod
    def initialize(cls, log_dir: Optional[str] = None, debug: Optional[bool] = None) -> None:
        """
        Initialize the logging system with component-specific loggers.

        Args:
            log_dir: Directory for log files. Defaults to config.app.log_dir
            debug: Enable debug logging for all components. Defaults to config.server.debug
        """
        if cls._initialized:
            return

        config = get_config()
        if debug is None:
            debug = config.server.debug

        if config.app.log_to_file:
            cls._log_dir = Path(log_dir or config.app.log_dir)
            # Session-specific subdirectory
            session_dir = datetime.now().strftime("%Y%m%d_%H%M%S")
            cls._log_dir = cls._log_dir / session_dir
            cls._log_dir.mkdir(parents=True, exist_ok=True)

        detailed_formatter = logging.Formatter(cls.DETAILED_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        for component_name, component_config in cls.COMPONENTS.items():
            logger = logging.getLogger(f"campuscoffee.{component_name}")

            # Clear existing handlers
            logger.handlers.clear()

            level = logging.DEBUG if debug else component_config['level']
            logger.setLevel(level)

            if cls._log_dir is not None:
                file_handler = logging.handlers.RotatingFileHandler(
                    cls._log_dir / component_config['file'],
                    maxBytes=10 * 1024 * 1024,  # 10MB
                    backupCount=5,
                    encoding='utf-8'
                )
                file_handler.setLevel(level)
                file_handler.setFormatter(detailed_formatter)
                logger.addHandler(file_handler)

            # Console handler for errors and critical
            if component_name in ['error', 'main']:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(logging.ERROR)
                console_handler.setFormatter(simple_formatter)
                logger.addHandler(console_handler)

            cls._loggers[component_name] = logger

        cls._initialized = True

        main_logger = cls._loggers['main']
        main_logger.info(f"CampusCoffee logging initialized (debug={debug}, log_dir={cls._log_dir})")

    @classmethod
    def get_logger(cls, component: str) -> logging.Logger:
        """
        Get a logger for a specific component.

        Args:
            component: Component name (api, database, domain, ...). Unknown
                       components get a logger created on demand.

        Returns:
            Logger instance for the component
        """
        if not cls._initialized:
            cls.initialize()

        if component not in cls._loggers:
            cls._create_component_logger(component)
        return cls._loggers[component]

    @classmethod
    def _create_component_logger(cls, component: str) -> None:
        """Create a component logger on-demand."""
        logger = logging.getLogger(f"campuscoffee.{component}")
        logger.handlers.clear()

        config = get_config()
        level = logging.DEBUG if config.server.debug else logging.INFO
        logger.setLevel(level)

        if cls._log_dir is not None:
            file_handler = logging.handlers.RotatingFileHandler(
                cls._log_dir / f'{component}.log',
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter(cls.DETAILED_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
            )
            logger.addHandler(file_handler)

        cls._loggers[component] = logger

    @classmethod
    def log_exception(cls, component: str, exc: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an exception with context to both component and error logs.

        Args:
            component: Component where the exception occurred
            exc: The exception to log
            context: Additional context information
        """
        component_logger = cls.get_logger(component)
        error_logger = cls.get_logger('error')

        context_str = ""
        if context:
            context_str = " | Context: " + ", ".join(f"{k}={v}" for k, v in context.items())

        component_logger.error(f"Exception in {component}: {type(exc).__name__}: {exc}{context_str}", exc_info=exc)
        error_logger.error(f"[{component}] {type(exc).__name__}: {exc}{context_str}", exc_info=exc)

    @classmethod
    def get_log_directory(cls) -> Optional[Path]:
        """Get the current log directory path."""
        return cls._log_dir

    @classmethod
    def reset(cls) -> None:
        """Close all handlers and forget every component logger."""
        for logger in cls._loggers.values():
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
        cls._loggers = {}
        cls._initialized = False
        cls._log_dir = None


# Convenience functions
def get_logger(component: str) -> logging.Logger:
    """Get a logger for a specific component."""
    return ComponentLogger.get_logger(component)


def log_exception(component: str, exc: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """Log an exception with context."""
    ComponentLogger.log_exception(component, exc, context)
