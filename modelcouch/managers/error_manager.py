# ========================================================================
# File:       modelcouch/managers/error_manager.py
# Purpose:    Evidencija grešaka (sigurno logovanje); ne guta izuzetke
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-19
# ========================================================================

from modelcouch.config.env import EnvLoader
from modelcouch.handlers.error_handler import ErrorHandler
from modelcouch.managers.log_manager import LogManager
from modelcouch.helpers.core_helper import safe_call


class ErrorManager:
    _errors = []
    _dev_mode = None

    @classmethod
    def initialize(cls, dev_mode: bool = None):
        cls._errors = []
        cls._dev_mode = EnvLoader.get_bool("DEV_MODE", False) if dev_mode is None else dev_mode

    @classmethod
    def dev_mode(cls) -> bool:
        if cls._dev_mode is None:
            cls._dev_mode = EnvLoader.get_bool("DEV_MODE", False)
        return cls._dev_mode

    @classmethod
    def create(cls, error: Exception, context: str = None):
        """Zabeleži grešku; pozivalac odlučuje da li je ponovo baca."""
        cls._errors.append(error)
        formatted = ErrorHandler.format_error(error, context)
        trace = ErrorHandler.get_traceback(error)

        ErrorHandler.display(error, cls.dev_mode(), context)

        safe_call(LogManager.create, "error", f"{formatted}\n{trace}")

    @classmethod
    def read(cls, last_only: bool = True):
        if last_only:
            return cls._errors[-1] if cls._errors else None
        return cls._errors
