# ============================================================================
# File:       modelcouch/handlers/log_handler.py
# Purpose:    Pisanje logova na osnovu nivoa (INFO, ERROR, ...)
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-19 (putanja se čita iz .env pri svakom upisu)
# ============================================================================

import os
from datetime import datetime
from modelcouch.config.env import EnvLoader

DEFAULT_LOG_PATH = "modelcouch/data/logs/app.log"


class LogHandler:

    @staticmethod
    def log_file_path() -> str:
        return EnvLoader.get("LOG_FILE_PATH", DEFAULT_LOG_PATH) or DEFAULT_LOG_PATH

    @staticmethod
    def _ensure_log_dir(path: str):
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        except Exception as e:
            print(f"❌ Ne mogu kreirati log direktorijum: {e}")

    @staticmethod
    def _write(level, message):
        try:
            path = LogHandler.log_file_path()
            LogHandler._ensure_log_dir(path)
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            log_entry = f"[{level.upper()}] {timestamp} - {message}\n"
            with open(path, "a", encoding="utf-8") as f:
                f.write(log_entry)
        except Exception as e:
            print(f"❌ Neuspelo logovanje: {e}")

    @staticmethod
    def info(message):
        LogHandler._write("INFO", message)

    @staticmethod
    def warning(message):
        LogHandler._write("WARNING", message)

    @staticmethod
    def success(message):
        LogHandler._write("SUCCESS", message)

    @staticmethod
    def error(message):
        LogHandler._write("ERROR", message)

    @staticmethod
    def critical(message):
        LogHandler._write("CRITICAL", message)
