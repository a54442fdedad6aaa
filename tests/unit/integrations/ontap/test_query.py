"""Unit tests for the ONTAP query builder."""

from __future__ import annotations

import pytest

from storage_operations_manager.integrations.ontap.query import Query


@pytest.mark.unit
class TestQuery:
    """Tests for Query."""

    def test_empty_query(self) -> None:
        query = Query()

        assert query.to_params() == {}
        assert not query

    def test_set_replaces_value(self) -> None:
        query = Query().set("scope", "svm").set("scope", "cluster")

        assert query.get("scope") == ["cluster"]
        assert query.to_params() == {"scope": "cluster"}

    def test_add_builds_multi_valued_filter(self) -> None:
        query = Query().add("name", "daily").add("name", "weekly")

        assert query.to_params() == {"name": "daily|weekly"}

    def test_add_ignores_duplicates(self) -> None:
        query = Query().add("name", "daily").add("name", "daily")

        assert query.get("name") == ["daily"]

    def test_fields_are_comma_joined_and_deduplicated(self) -> None:
        query = Query().fields(["destination", "gateway", "destination"])

        assert query.projection == ["destination", "gateway"]
        assert query.to_params() == {"fields": "destination,gateway"}

    def test_fields_replace_previous_projection(self) -> None:
        query = Query().fields(["a"]).fields(["b"])

        assert query.projection == ["b"]

    def test_fields_always_emitted_last(self) -> None:
        query = Query().fields(["destination"]).set("scope", "cluster")

        assert list(query.to_params()) == ["scope", "fields"]

    def test_booleans_render_lowercase(self) -> None:
        query = Query().set("return_records", True).set("is_default", False)

        assert query.to_params() == {"return_records": "true", "is_default": "false"}

    def test_get_unknown_key(self) -> None:
        assert Query().get("svm.name") is None

    def test_get_returns_copy(self) -> None:
        query = Query().set("name", "daily")

        query.get("name").append("weekly")  # type: ignore[union-attr]

        assert query.get("name") == ["daily"]

    def test_repr(self) -> None:
        assert "scope" in repr(Query().set("scope", "svm"))
