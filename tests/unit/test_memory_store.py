"""Unit tests for the in-memory host node store."""

import uuid

import pytest

from kontent_source.core.exceptions import HostContractError
from kontent_source.host import InMemoryNodeStore, NodeHost, canonical_json
from kontent_source.models.graph import SchemaRegistration
from kontent_source.models.nodes import NodeInternal, ProjectedNode


def _node(node_id: str = "n1") -> ProjectedNode:
    return ProjectedNode(
        id=node_id,
        system={"codename": "a", "type": "article"},
        elements={},
        internal=NodeInternal(type="KontentItemArticle", content_digest="d"),
    )


class TestInMemoryNodeStore:
    """Test the append-only store."""

    def test_implements_protocol(self, store):
        """The store satisfies the NodeHost protocol."""
        assert isinstance(store, NodeHost)

    def test_node_ids_are_stable(self):
        """Separate stores produce the same id for the same key."""
        assert InMemoryNodeStore().create_node_id("article-1") == InMemoryNodeStore().create_node_id(
            "article-1"
        )
        assert uuid.UUID(InMemoryNodeStore().create_node_id("article-1")).version == 5

    def test_node_ids_differ_per_key(self, store):
        """Different keys produce different ids."""
        assert store.create_node_id("article-1") != store.create_node_id("article-2")

    def test_digest_ignores_key_order(self, store):
        """Digests are computed over canonical JSON."""
        assert store.create_content_digest({"a": 1, "b": [1, 2]}) == store.create_content_digest(
            {"b": [1, 2], "a": 1}
        )
        assert store.create_content_digest({"a": 1}) != store.create_content_digest({"a": 2})

    def test_canonical_json(self):
        """Keys are sorted and whitespace is dropped."""
        assert canonical_json({"b": 1, "a": None}) == '{"a":null,"b":1}'

    def test_rejects_nodes_before_types(self, store):
        """create_node before create_types violates the two-phase contract."""
        with pytest.raises(HostContractError):
            store.create_node(_node())

    def test_rejects_duplicate_ids(self, store):
        """A node id can only be created once per run."""
        store.create_types(SchemaRegistration(base_type_defs=""))
        store.create_node(_node())

        with pytest.raises(HostContractError):
            store.create_node(_node())

    def test_read_helpers(self, store):
        """Registered types and nodes can be looked up."""
        registration = SchemaRegistration(base_type_defs="")
        store.create_types(registration)
        store.create_node(_node("n1"))
        store.create_node(_node("n2"))

        assert store.registration == registration
        assert store.get_node("n1").id == "n1"
        assert store.get_node("missing") is None
        assert len(store.nodes_of_type("KontentItemArticle")) == 2
