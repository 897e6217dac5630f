# =============================================================================
# File:        modelcouch/model/factory.py
# Purpose:     ModelFactory — make/get/put/delete/exists/valid nad jednim
#              store-om i jednim ModelSpec-om
# Author:      Aleksandar Popović
# Created:     2025-08-19
# =============================================================================

from __future__ import annotations
import re
from typing import Any, Callable, Dict, Mapping, Optional, Union

from modelcouch.db.base_store import BaseStore
from modelcouch.db.connection import resolve_store
from modelcouch.db.errors import DocumentNotFound
from modelcouch.helpers.core_helper import select_present
from modelcouch.managers.error_manager import ErrorManager
from modelcouch.managers.log_manager import LogManager
from modelcouch.managers.validator_manager import ValidatorManager
from modelcouch.model.spec import ID_FIELD, REV_FIELD, ModelSpec, SpecError

_TYPENAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


def snake_name(typename: str) -> str:
    """"BlogPost" / "blog-post" -> "blog_post"."""
    s = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", typename)
    return s.replace("-", "_").lower()


class ModelFactory:
    """
    Šest operacija vezanih za jedan store i jedan ModelSpec.
    Nema internog stanja između poziva: svaka operacija zavisi samo od argumenata,
    spec-a (nepromenljiv) i onoga što je u bazi.
    """

    def __init__(self, store: BaseStore, typename: str, spec: ModelSpec):
        if not isinstance(typename, str) or not _TYPENAME_RE.match(typename):
            raise SpecError(f"Neispravno ime tipa: {typename!r}")
        self.store = store
        self.typename = typename
        self.spec = spec
        self._label = f"ModelFactory:{typename}"

    def __repr__(self) -> str:
        return f"<ModelFactory {self.typename} store={self.store.name} fields={list(self.spec.fields)}>"

    def _log(self, level: str, msg: str):
        getattr(LogManager, level)(f"[{self._label}] {msg}")

    def _store_call(self, op: str, fn: Callable, arg):
        # greške store-a se beleže i prosleđuju neizmenjene
        try:
            return fn(arg)
        except Exception as e:
            ErrorManager.create(e, context=f"[{self._label}] {op}:")
            raise

    # --------------------------------------------------------------------- #
    # Operacije
    # --------------------------------------------------------------------- #

    def make(self, *args, **kwargs) -> Dict[str, Any]:
        """
        Prazan dokument (sva polja None) spojen sa argumentima:
        make({"username": "ada"}), make("username", "ada") ili make(username="ada").
        Ako postoji on_init, vraća se njegov rezultat. Bez validacije.
        """
        if len(args) == 1 and isinstance(args[0], Mapping):
            values = dict(args[0])
        elif len(args) % 2 == 0:
            values = dict(zip(args[::2], args[1::2]))
        else:
            raise ValueError(f"make_{snake_name(self.typename)}: očekivan dict ili parovi ključ/vrednost")
        values.update(kwargs)

        doc = {**self.spec.empty_document(), **values}
        if self.spec.on_init is None:
            return doc
        return self.spec.on_init(doc)

    def get(self, doc_id: Any) -> Optional[Dict[str, Any]]:
        """Dokument iz baze spojen sa praznim šablonom; None ako ne postoji."""
        raw = self._store_call("get", self.store.get, doc_id)
        if raw is None:
            return None
        return {**self.spec.empty_document(), **raw}

    def valid(self, doc: Mapping[str, Any]) -> bool:
        """True ako su sva required polja popunjena i svi validatori prolaze."""
        return ValidatorManager.validate(doc, self.spec, label=self._label)

    def put(self, doc: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        on_put (ako postoji) -> samo deklarisana ne-None polja -> valid ->
        upis u store. Vraća rezultat store-a (sa _id/_rev) ili None ako
        dokument nije validan (tada nema upisa).
        """
        if self.spec.on_put is not None:
            doc = self.spec.on_put(doc)

        pruned = select_present(doc, self.spec.fields)
        if not self.valid(pruned):
            self._log("warning", f"put odbijen (nevalidan dokument) id={pruned.get(ID_FIELD)}")
            return None

        result = self._store_call("put", self.store.put, pruned)
        self._log("success", f"put -> id={result.get(ID_FIELD)} rev={result.get(REV_FIELD)}")
        return result

    def delete(self, doc_id: Any) -> Dict[str, Any]:
        """
        Briše dokument po trenutnom _id/_rev. Posle uspeha zove on_delete
        sa {"id": ..., "rev": ...} i vraća isti rezultat. Nepostojeći id je
        DocumentNotFound za svaki store (i za CouchStore).
        """
        doc = self.get(doc_id)
        if doc is None:
            err = DocumentNotFound(doc_id)
            ErrorManager.create(err, context=f"[{self._label}] delete:")
            raise err

        outcome = self._store_call("delete", self.store.delete, doc)
        result = {"id": outcome.get("id", doc_id), "rev": outcome.get("rev")}
        self._log("info", f"delete -> id={result['id']} rev={result['rev']}")

        if self.spec.on_delete is not None:
            self.spec.on_delete(result)
        return result

    def exists(self, doc_id: Any) -> bool:
        return self.get(doc_id) is not None

    # --------------------------------------------------------------------- #
    # Imena operacija
    # --------------------------------------------------------------------- #

    def operation_names(self) -> Dict[str, str]:
        """{ "make": "make_user", ..., "exists": "user_exists" }"""
        t = snake_name(self.typename)
        return {
            "make": f"make_{t}",
            "get": f"get_{t}",
            "put": f"put_{t}",
            "delete": f"delete_{t}",
            "valid": f"valid_{t}",
            "exists": f"{t}_exists",
        }

    def operations(self) -> Dict[str, Callable]:
        """Operacije pod izvedenim imenima, npr. za globals().update(...)."""
        return {name: getattr(self, op) for op, name in self.operation_names().items()}


def define_model(
    db: Any,
    typename: str,
    spec: Union[ModelSpec, Mapping[str, Any], None] = None,
    **spec_kwargs,
) -> ModelFactory:
    """
    Pravi ModelFactory za dati DB handle (store, couchdb2.Database, URL ili
    None za .env) i spec (ModelSpec, dict ili keyword argumenti).

        users = define_model("http://localhost:5984/users", "user",
                             fields=["username", "email"],
                             required=["username", "email"])
        users.put(users.make(username="ada", email="ada@x.com"))
    """
    if isinstance(spec, ModelSpec):
        if spec_kwargs:
            raise SpecError("spec i keyword argumenti se ne mogu kombinovati")
        model_spec = spec
    else:
        model_spec = ModelSpec.from_mapping({**dict(spec or {}), **spec_kwargs})

    store = resolve_store(db)
    factory = ModelFactory(store, typename, model_spec)
    LogManager.info(f"[{factory._label}] define_model -> store={store.name} fields={list(model_spec.fields)}")
    return factory
