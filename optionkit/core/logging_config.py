"""
Logging configuration for the optionkit package with structured JSON output and context support
"""
import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional

from optionkit.core.config import get_settings

# Context variables for the option currently being processed
option_context: ContextVar[Dict[str, Any]] = ContextVar('option_context', default={})

ROOT_LOGGER_NAME = "optionkit"

_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName',
}


class ContextualFormatter(logging.Formatter):
    """JSON formatter with context support"""

    def __init__(self, *args, **kwargs):
        kwargs.pop('fmt', None)
        self.datefmt = kwargs.pop('datefmt', None)
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_dict = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'function': record.funcName,
            'line': record.lineno,
            'message': record.getMessage(),
        }

        ctx = option_context.get({})
        if ctx:
            log_dict.update(ctx)

        if record.exc_info:
            log_dict['exception'] = self.formatException(record.exc_info)

        # Extra fields passed with extra=
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            try:
                json.dumps(value, default=str)
                log_dict[key] = value
            except (TypeError, ValueError):
                log_dict[key] = str(value)

        return json.dumps(log_dict, ensure_ascii=False, default=str)


class LoggingConfig:
    """Centralized logging configuration for the package logger"""

    _configured = False
    _module_levels: Dict[str, str] = {}

    @classmethod
    def configure(cls, module_levels: Optional[Dict[str, str]] = None, force: bool = False):
        """Configure the ``optionkit`` logger; the root logger is left to the host"""
        if cls._configured and not force:
            return

        settings = get_settings()

        levels = {ROOT_LOGGER_NAME: settings.log_level}
        levels.update(settings.module_levels)
        if module_levels:
            levels.update(module_levels)
        cls._module_levels = levels

        if settings.log_format == "json":
            formatter = ContextualFormatter(datefmt='%Y-%m-%d %H:%M:%S')
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in list(package_logger.handlers):
            if getattr(handler, '_optionkit_handler', False):
                package_logger.removeHandler(handler)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler._optionkit_handler = True
        package_logger.addHandler(console_handler)

        for module, level in levels.items():
            logging.getLogger(module).setLevel(getattr(logging, level.upper(), logging.WARNING))

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger for a module"""
        if not cls._configured:
            cls.configure()
        return logging.getLogger(name)

    @classmethod
    def set_module_level(cls, module: str, level: str):
        """Set logging level for a specific module"""
        logger = logging.getLogger(module)
        logger.setLevel(getattr(logging, level.upper()))
        cls._module_levels[module] = level.upper()

    @classmethod
    def get_module_level(cls, module: str) -> str:
        """Get logging level for a specific module"""
        logger = logging.getLogger(module)
        return logging.getLevelName(logger.getEffectiveLevel())

    @classmethod
    def set_context(cls, **kwargs):
        """Set context variables for logging"""
        ctx = option_context.get({}).copy()
        ctx.update(kwargs)
        option_context.set(ctx)

    @classmethod
    def clear_context(cls):
        """Clear context variables"""
        option_context.set({})

    @classmethod
    def reset(cls):
        """Forget the current configuration so the next logger request reconfigures"""
        cls._configured = False
        cls._module_levels = {}
