# ========================================================================
# File:       modelcouch/handlers/error_handler.py
# Purpose:    Formatira i priprema greške za ErrorManager
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-21
# ========================================================================

import traceback


class ErrorHandler:
    @staticmethod
    def format_error(error: Exception, context: str = None) -> str:
        formatted = f"{type(error).__name__}: {str(error)}"
        return f"{context} {formatted}" if context else formatted

    @staticmethod
    def get_traceback(error: Exception) -> str:
        # radi i van except bloka (npr. kad izuzetak stiže iz hook-a)
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))

    @staticmethod
    def display(error: Exception, dev_mode: bool = True, context: str = None):
        """Prikazuje grešku u dev režimu, bez logovanja."""
        if dev_mode:
            formatted = ErrorHandler.format_error(error, context)
            trace = ErrorHandler.get_traceback(error)
            print(f"[ERROR]: {formatted}\n{trace}")
