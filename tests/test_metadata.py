import logging

import pytest

import pandoc_jekyll.metadata as metadata
from pandoc_jekyll.errors import StructuralViolation


def test_inject_builds_meta_inlines_with_spaces():
    meta = {}

    assert metadata.inject(meta, "tags", "test test2") is True
    assert meta["tags"] == {
        "t": "MetaInlines",
        "c": [
            {"t": "Str", "c": "test"},
            {"t": "Space"},
            {"t": "Str", "c": "test2"},
        ],
    }


def test_inject_single_token_has_no_space():
    meta = {}

    metadata.inject(meta, "cover", "aurora10.jpg")

    assert meta["cover"] == {"t": "MetaInlines", "c": [{"t": "Str", "c": "aurora10.jpg"}]}


def test_inject_keeps_existing_value():
    authored = {"t": "MetaInlines", "c": [{"t": "Str", "c": "authored"}]}
    meta = {"tags": authored}

    assert metadata.inject(meta, "tags", "from directive") is False
    assert meta["tags"] is authored


@pytest.mark.parametrize("value", ["", None])
def test_inject_skips_empty_value(caplog, value):
    caplog.set_level(logging.INFO, logger="pandoc_jekyll")
    meta = {}

    assert metadata.inject(meta, "summary", value) is False
    assert meta == {}
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
        ("INFO", "No value found for summary meta key - skipping it")
    ]


@pytest.mark.parametrize("key", ["", None])
def test_inject_rejects_empty_key(key):
    with pytest.raises(StructuralViolation):
        metadata.inject({}, key, "value")


@pytest.mark.parametrize("meta", [None, [], "meta"])
def test_inject_rejects_non_object_meta(meta):
    with pytest.raises(StructuralViolation):
        metadata.inject(meta, "tags", "a b")


def test_empty_value_checked_before_meta_shape():
    assert metadata.inject([], "lang", "") is False


def test_split_value_keeps_interior_empty_tokens():
    assert metadata.split_value("a  b") == ["a", "", "b"]
    assert metadata.split_value(" a") == ["", "a"]
    assert metadata.split_value("a b  ") == ["a", "b"]


def test_build_meta_inlines_emits_empty_str_for_double_space():
    node = metadata.build_meta_inlines("a  b")

    assert node["c"] == [
        {"t": "Str", "c": "a"},
        {"t": "Space"},
        {"t": "Str", "c": ""},
        {"t": "Space"},
        {"t": "Str", "c": "b"},
    ]
