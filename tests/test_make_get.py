import pytest

from modelcouch.model.factory import define_model


def test_make_without_args_has_every_field_set_to_none(account_model):
    doc = account_model.make()
    assert doc == {"_id": None, "_rev": None, "username": None, "email": None}


def test_make_accepts_mapping_pairs_and_keywords(account_model):
    expected = {"_id": None, "_rev": None, "username": "ada", "email": "ada@x.com"}
    assert account_model.make({"username": "ada", "email": "ada@x.com"}) == expected
    assert account_model.make("username", "ada", "email", "ada@x.com") == expected
    assert account_model.make(username="ada", email="ada@x.com") == expected


def test_make_odd_number_of_pairs_is_rejected(account_model):
    with pytest.raises(ValueError):
        account_model.make("username", "ada", "email")


def test_make_does_not_validate(account_model, reported):
    doc = account_model.make(email="no-at-sign")
    assert doc["email"] == "no-at-sign"
    assert reported == []


def test_make_runs_on_init(store):
    seen = []

    def on_init(doc):
        seen.append(dict(doc))
        return {**doc, "status": "draft"}

    posts = define_model(store, "post", fields=["title", "status"], on_init=on_init)
    doc = posts.make(title="Hello")

    assert doc["status"] == "draft"
    assert seen == [{"_id": None, "_rev": None, "title": "Hello", "status": None}]


def test_get_merges_stored_document_onto_template(store, account_model):
    stored = store.put({"username": "ada"})
    doc = account_model.get(stored["_id"])
    assert doc == {"_id": stored["_id"], "_rev": stored["_rev"], "username": "ada", "email": None}


def test_get_keeps_undeclared_stored_fields(store, account_model):
    stored = store.put({"username": "ada", "legacy": 1})
    assert account_model.get(stored["_id"])["legacy"] == 1


def test_get_missing_document_returns_none(account_model):
    assert account_model.get("nope") is None
    assert account_model.exists("nope") is False
