# ============================================================================
# File:       modelcouch/managers/log_manager.py
# Purpose:    LogManager klasa — klasni API sloj
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-19
# ============================================================================

from modelcouch.handlers.log_handler import LogHandler
from modelcouch.helpers.core_helper import safe_call


class LogManager:
    _log_entries = []
    _max_entries = 1000

    @classmethod
    def initialize(cls, max_entries: int = 1000):
        cls._log_entries = []
        cls._max_entries = max_entries

    @classmethod
    def create(cls, level: str, message: str):
        """
        Centralni ulaz za log. Pamti u memoriji i delegira LogHandler-u.
        Ako odgovarajuća metoda ne postoji na LogHandler-u, koristi _write fallback.
        """
        level_upper = (level or "").upper()
        level_lower = level_upper.lower()

        cls._log_entries.append((level_upper, message))
        if len(cls._log_entries) > cls._max_entries:
            del cls._log_entries[0]

        method = getattr(LogHandler, level_lower, None)
        if callable(method):
            safe_call(method, message)
            return

        safe_call(LogHandler._write, level_upper, message)

    @classmethod
    def read(cls, last_only: bool = False, level: str = None):
        entries = cls._log_entries
        if level:
            entries = [e for e in entries if e[0] == level.upper()]
        if last_only:
            return entries[-1] if entries else None
        return entries

    # === Shortcut/proxy metode ===

    @classmethod
    def info(cls, message: str):
        cls.create("INFO", message)

    @classmethod
    def warning(cls, message: str):
        cls.create("WARNING", message)

    @classmethod
    def success(cls, message: str):
        cls.create("SUCCESS", message)

    @classmethod
    def error(cls, message: str):
        cls.create("ERROR", message)

    @classmethod
    def critical(cls, message: str):
        cls.create("CRITICAL", message)
