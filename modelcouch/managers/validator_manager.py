# ============================================================================
# File:       modelcouch/managers/validator_manager.py
# Purpose:    Centralni API za validaciju dokumenata (logovanje + evidencija)
# Author:     Aleksandar Popovic
# Created:    2025-08-13
# Updated:    2025-08-19
# ============================================================================

from __future__ import annotations
from typing import Any, Dict, TYPE_CHECKING

from modelcouch.handlers.validator_handler import ValidatorHandler
from modelcouch.managers.error_manager import ErrorManager
from modelcouch.managers.log_manager import LogManager

if TYPE_CHECKING:
    from modelcouch.model.spec import ModelSpec


class ValidatorManager:
    @staticmethod
    def validate(doc: Dict[str, Any], spec: "ModelSpec", *, label: str = "model") -> bool:
        try:
            failures = ValidatorHandler.check(
                doc,
                spec.fields,
                spec.required,
                spec.validators,
                on_error=spec.on_validate_error,
            )
        except Exception as e:
            # izuzetak iz on_validate_error hook-a
            ErrorManager.create(e, context=f"[{label}]")
            LogManager.error(f"[{label}] Unexpected validation error: {e}")
            raise

        for failure in failures:
            if failure.error is not None:
                ErrorManager.create(failure.error, context=f"[{label}] validator '{failure.field}':")
            LogManager.warning(f"[{label}] Validation failed: {failure.field} {failure.message}")

        return not failures
