"""Tests for schema node to type expression mapping."""

from __future__ import annotations

import pytest
from conftest import make_context

from dap_typegen.codegen.mapper import alias_type, map_type
from dap_typegen.schema.errors import MalformedSchemaError
from dap_typegen.schema.models import SchemaNode


def _map(raw: dict, context=None) -> str:
    context = context or make_context()
    return map_type(SchemaNode.model_validate(raw), context)


class TestMapType:
    def test_enum_becomes_literal_union(self):
        assert _map({"enum": ["a", "b"]}) == "'a' | 'b'"

    def test_single_enum_value(self):
        assert _map({"type": "string", "enum": ["exited"]}) == "'exited'"

    def test_suggested_enum_becomes_literal_union(self):
        assert _map({"type": "string", "_enum": ["MD5", "SHA1"]}) == "'MD5' | 'SHA1'"

    def test_enum_wins_over_type(self):
        assert _map({"type": "integer", "enum": [1, 2]}) == "'1' | '2'"

    def test_integer_is_number(self):
        assert _map({"type": "integer"}) == "number"

    def test_primitives_pass_through(self):
        for primitive in ("string", "boolean", "number", "object", "null"):
            assert _map({"type": primitive}) == primitive

    def test_array_of_integers(self):
        assert _map({"type": "array", "items": {"type": "integer"}}) == "number[]"

    def test_array_without_items_is_any(self):
        assert _map({"type": "array"}) == "any[]"

    def test_nested_arrays(self):
        raw = {"type": "array", "items": {"type": "array", "items": {"type": "string"}}}
        assert _map(raw) == "string[][]"

    def test_type_union(self):
        raw = {"type": ["array", "boolean", "integer", "null", "number", "object", "string"]}
        assert _map(raw) == "any[] | boolean | number | null | number | object | string"

    def test_missing_type_is_malformed(self):
        with pytest.raises(MalformedSchemaError, match="no type"):
            _map({"description": "nothing here"})


class TestReferences:
    def test_ref_returns_bare_name_and_queues(self):
        context = make_context()
        assert _map({"$ref": "#/definitions/Source"}, context) == "Source"
        assert context.worklist.pending == ("Source",)

    def test_ref_queued_once(self):
        context = make_context()
        _map({"$ref": "#/definitions/Source"}, context)
        _map({"type": "array", "items": {"$ref": "#/definitions/Source"}}, context)
        assert context.worklist.pending == ("Source",)
        assert context.worklist.seen == frozenset({"Source"})

    def test_array_of_refs(self):
        context = make_context()
        assert _map({"type": "array", "items": {"$ref": "#/definitions/Breakpoint"}}, context) == "Breakpoint[]"
        assert "Breakpoint" in context.worklist.seen

    def test_enum_does_not_queue(self):
        context = make_context()
        _map({"enum": ["a"]}, context)
        assert not context.worklist


class TestAliasType:
    def _alias(self, raw: dict, context=None) -> str:
        context = context or make_context()
        return alias_type(SchemaNode.model_validate(raw), context, owner="Alias")

    def test_enum_restricted_string_is_bare_primitive(self):
        assert self._alias({"type": "string", "enum": ["MD5", "SHA1"]}) == "string"

    def test_suggested_enum_is_not_expanded(self):
        assert self._alias({"type": "string", "_enum": ["path", "uri"]}) == "string"

    def test_integer_alias_is_number(self):
        assert self._alias({"type": "integer", "enum": [1, 2]}) == "number"

    def test_ref_alias_falls_back_and_queues(self):
        context = make_context()
        assert self._alias({"$ref": "#/definitions/Source"}, context) == "Source"
        assert context.worklist.pending == ("Source",)

    def test_type_list_alias_falls_back(self):
        assert self._alias({"type": ["string", "integer"]}) == "string | number"

    def test_untyped_alias_is_malformed(self):
        with pytest.raises(MalformedSchemaError, match="Alias"):
            self._alias({"description": "nothing here"})
