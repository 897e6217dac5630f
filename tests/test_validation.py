import pytest

from modelcouch.handlers.validator_handler import REQUIRED_MESSAGE, ValidatorHandler
from modelcouch.managers.error_manager import ErrorManager
from modelcouch.managers.log_manager import LogManager
from modelcouch.model.factory import define_model


@pytest.mark.parametrize("blank", [None, "", [], {}, ()])
def test_required_field_blank_is_invalid(store, blank):
    calls = []
    m = define_model(store, "thing", fields=["name", "other"], required=["name"],
                     on_validate_error=lambda d, f, msg: calls.append((f, msg)))
    assert m.valid({"name": blank, "other": "x"}) is False
    assert calls == [("name", REQUIRED_MESSAGE)]


@pytest.mark.parametrize("value", ["a", [1], {"k": 1}, 0, False])
def test_required_field_with_value_is_valid(store, value):
    m = define_model(store, "thing", fields=["name", "other"], required=["name"])
    assert m.valid({"name": value}) is True


def test_required_field_missing_key_is_invalid_without_hook(store):
    m = define_model(store, "thing", fields=["name"], required=["name"])
    assert m.valid({}) is False


def test_failed_validator_reports_once_with_its_message(account_model, reported):
    doc = {"username": "ada", "email": "ada.x.com"}
    assert account_model.valid(doc) is False
    assert reported == [("email", "must contain @")]


def test_validators_run_in_order_without_short_circuit(store):
    calls = []
    m = define_model(
        store,
        "item",
        fields=["a", "b"],
        validators={
            "a": [(lambda v: v > 10, "too small"), (lambda v: v % 2 == 0, "must be even")],
            "b": [(lambda v: v == "ok", "not ok")],
        },
        on_validate_error=lambda d, f, msg: calls.append((f, msg)),
    )

    assert m.valid({"a": 3, "b": "bad"}) is False
    assert calls == [("a", "too small"), ("a", "must be even"), ("b", "not ok")]


def test_required_failure_skips_that_fields_validators(account_model, reported):
    assert account_model.valid({"username": None, "email": None}) is False
    assert reported == [("username", REQUIRED_MESSAGE), ("email", REQUIRED_MESSAGE)]


def test_validator_that_raises_counts_as_failure_and_is_recorded(store):
    calls = []
    m = define_model(
        store,
        "item",
        fields=["email"],
        validators={"email": [(lambda v: "@" in v, "must contain @")]},
        on_validate_error=lambda d, f, msg: calls.append((f, msg)),
    )

    # email nije required pa validator dobija None -> TypeError
    assert m.valid({}) is False
    assert calls == [("email", "must contain @")]
    assert isinstance(ErrorManager.read(), TypeError)


def test_validation_failure_is_logged_as_warning(account_model):
    account_model.valid({"username": "ada"})
    last = LogManager.read(last_only=True, level="warning")
    assert last is not None and "email" in last[1]


def test_exception_in_hook_propagates(store):
    def boom(doc, field, message):
        raise RuntimeError("hook failed")

    m = define_model(store, "item", fields=["name"], required=["name"], on_validate_error=boom)
    with pytest.raises(RuntimeError):
        m.valid({})
    assert isinstance(ErrorManager.read(), RuntimeError)


def test_handler_returns_failures():
    failures = ValidatorHandler.check(
        {"x": 1},
        ["x", "y"],
        {"y"},
        {"x": [(lambda v: v > 5, "too small")]},
    )
    assert [(f.field, f.message) for f in failures] == [("x", "too small"), ("y", REQUIRED_MESSAGE)]
    assert ValidatorHandler.check({"x": 9}, ["x"], set(), {"x": [(lambda v: v > 5, "too small")]}) == []


def test_hook_receives_the_document_given_to_valid(store):
    calls = []
    m = define_model(
        store,
        "account",
        fields=["username", "email"],
        required=["username", "email"],
        validators={"email": [(lambda v: "@" in v, "must contain @")]},
        on_validate_error=lambda d, f, msg: calls.append((d, f, msg)),
    )
    doc = {"username": None, "email": "ada.x.com"}

    assert m.valid(doc) is False
    assert [(f, msg) for _, f, msg in calls] == [("username", REQUIRED_MESSAGE), ("email", "must contain @")]
    assert all(d is doc for d, _, _ in calls)
