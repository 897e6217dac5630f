import re

from modelcouch.model.factory import ModelFactory, define_model
from modelcouch.managers.log_manager import LogManager

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _log_invalid(doc, field, message):
    LogManager.warning(f"user.{field} {message} (username={doc.get('username')!r})")


def _normalize(doc):
    doc = dict(doc)
    if isinstance(doc.get("username"), str):
        doc["username"] = doc["username"].strip()
    if isinstance(doc.get("email"), str):
        doc["email"] = doc["email"].strip().lower()
    return doc


USER_SPEC = {
    "fields": ["username", "email", "age"],
    "required": ["username", "email"],
    "validators": {
        "email": [
            (lambda v: "@" in str(v), "must contain @"),
            (lambda v: bool(EMAIL_RE.match(str(v))), "is not a valid email address"),
        ],
        "age": [
            (lambda v: v is None or (isinstance(v, int) and 0 <= v <= 150), "must be between 0 and 150"),
        ],
    },
    "on_put": _normalize,
    "on_validate_error": _log_invalid,
}


def user_model(db=None) -> ModelFactory:
    """db: store, couchdb2.Database, URL ili None (.env)."""
    return define_model(db, "user", USER_SPEC)
