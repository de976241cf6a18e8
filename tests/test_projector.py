import pytest

from metadata.projector import MetadataProjector
from structure.codec import decode_schema


def project(schema_doc, metadata_doc, data):
    return MetadataProjector().project(decode_schema(schema_doc), decode_schema(metadata_doc), data)


SCHEMA = {
    "name": "",
    "price": "",
    "items": [{"sku": "", "qty": ""}],
    "address": {"city": "", "zip": ""},
}

DATA = {
    "name": "widget",
    "price": "9",
    "items": [{"sku": "A1", "qty": "2"}, {"sku": "B2", "qty": "5"}],
    "address": {"city": "Paris", "zip": "75001"},
}


def test_keeps_only_marked_leaves():
    metadata = {"name": "", "items": [{"sku": ""}], "address": {"city": ""}}

    assert project(SCHEMA, metadata, DATA) == {
        "name": "widget",
        "items": [{"sku": "A1"}, {"sku": "B2"}],
        "address": {"city": "Paris"},
    }


def test_empty_metadata_schema_yields_empty_objects():
    schema = {"a": "", "b": {"c": "", "d": {"e": ""}}}
    data = {"a": "1", "b": {"c": "2", "d": {"e": "3"}}}

    assert project(schema, {}, data) == {"b": {"d": {}}}


def test_full_metadata_schema_returns_data():
    assert project(SCHEMA, SCHEMA, DATA) == DATA


def test_projection_ignores_keys_outside_schema():
    data = dict(DATA, extra="ignored")

    assert "extra" not in project(SCHEMA, SCHEMA, data)


def test_arrays_are_assigned_even_without_metadata_entry():
    schema = {"name": "", "tags": [{"label": ""}]}
    data = {"name": "widget", "tags": [{"label": "a"}, {"label": "b"}]}

    assert project(schema, {"name": ""}, data) == {"name": "widget", "tags": [{}, {}]}


def test_scalar_array_is_gated_by_its_own_key():
    schema = {"name": "", "tags": [""]}
    data = {"name": "widget", "tags": ["a", "b"]}

    assert project(schema, {"name": ""}, data) == {"name": "widget"}
    assert project(schema, {"name": "", "tags": [""]}, data) == data


def test_nested_arrays_of_objects_project_element_wise():
    schema = {"grid": [[{"x": "", "y": ""}]]}
    data = {"grid": [[{"x": "1", "y": "a"}, {"x": "2", "y": "b"}], [{"x": "3", "y": "c"}]]}

    assert project(schema, {"grid": [[{"x": ""}]]}, data) == {
        "grid": [[{"x": "1"}, {"x": "2"}], [{"x": "3"}]]
    }


def test_leaf_entry_at_container_key_includes_nothing_inside():
    schema = {"outer": {"inner": ""}, "list": [{"v": ""}]}
    data = {"outer": {"inner": "x"}, "list": [{"v": "1"}]}

    assert project(schema, {"outer": "", "list": ""}, data) == {"outer": {}, "list": [{}]}


def test_gating_uses_metadata_schema_at_the_same_depth():
    schema = {"name": "", "child": {"name": ""}}
    data = {"name": "top", "child": {"name": "nested"}}

    assert project(schema, {"name": "", "child": {}}, data) == {"name": "top", "child": {}}


@pytest.mark.parametrize(
    "data, expected",
    [
        ({}, {"name": "", "items": [], "address": {"city": ""}}),
        ({"items": None, "address": None}, {"name": "", "items": [], "address": {"city": ""}}),
    ],
)
def test_missing_data_projects_to_defaults(data, expected):
    metadata = {"name": "", "items": [{"sku": ""}], "address": {"city": ""}}

    assert project(SCHEMA, metadata, data) == expected


def test_projection_does_not_mutate_data():
    data = {"name": "widget", "items": [{"sku": "A1", "qty": "2"}]}
    snapshot = {"name": "widget", "items": [{"sku": "A1", "qty": "2"}]}

    project({"name": "", "items": [{"sku": "", "qty": ""}]}, {"items": [{"sku": ""}]}, data)

    assert data == snapshot
