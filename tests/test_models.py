"""
Tests for the models module.

Tests Vertex and Edge construction, identity and label updates.
"""

import pytest

from digraph.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    GraphError,
    InvalidValueError,
    NoSuchEdgeError,
    NoSuchVertexError,
)
from digraph.models import Edge, Vertex


class TestVertex:
    """Tests for the Vertex class."""

    def test_label(self):
        """Test that the label is kept as given."""
        vertex = Vertex("A")
        assert vertex.label == "A"
        assert str(vertex) == "A"

    def test_none_label_rejected(self):
        """Test that a None label is invalid."""
        with pytest.raises(InvalidValueError):
            Vertex(None)

    def test_equality_by_label(self):
        """Test that vertices with equal labels are equal and hash alike."""
        assert Vertex(1) == Vertex(1)
        assert Vertex(1) != Vertex(2)
        assert len({Vertex("A"), Vertex("A"), Vertex("B")}) == 2

    def test_immutable(self):
        """Test that the label cannot be reassigned."""
        vertex = Vertex("A")
        with pytest.raises(AttributeError):
            vertex.label = "B"

    def test_falsy_labels_allowed(self):
        """Test that only None is rejected, not other falsy values."""
        for label in (0, "", False, ()):
            assert Vertex(label).label == label


class TestEdge:
    """Tests for the Edge class."""

    def test_fields(self):
        """Test that endpoints and label are exposed."""
        edge = Edge("A", "B", "x")
        assert edge.source == "A"
        assert edge.destination == "B"
        assert edge.endpoints == ("A", "B")
        assert edge.label == "x"

    @pytest.mark.parametrize(
        "source, destination, label",
        [(None, "B", "x"), ("A", None, "x"), ("A", "B", None)],
    )
    def test_none_values_rejected(self, source, destination, label):
        """Test that None endpoints or labels are invalid."""
        with pytest.raises(InvalidValueError):
            Edge(source, destination, label)

    def test_equality_ignores_label(self):
        """Test that edges are identified by their endpoint pair only."""
        assert Edge("A", "B", "x") == Edge("A", "B", "y")
        assert hash(Edge("A", "B", "x")) == hash(Edge("A", "B", "y"))

    def test_equality_is_directed(self):
        """Test that reversed endpoints give a different edge."""
        assert Edge("A", "B", "x") != Edge("B", "A", "x")

    def test_not_equal_to_other_types(self):
        """Test comparison against non-edges."""
        assert Edge("A", "B", "x") != ("A", "B")
        assert Edge("A", "B", "x") != None  # noqa: E711

    def test_update_label(self):
        """Test that the label can be reassigned."""
        edge = Edge("A", "B", "x")
        edge.label = "z"
        assert edge.label == "z"

    def test_update_label_to_none_rejected(self):
        """Test that a failed update keeps the old label."""
        edge = Edge("A", "B", "x")
        with pytest.raises(InvalidValueError):
            edge.label = None
        assert edge.label == "x"

    def test_endpoints_read_only(self):
        """Test that the endpoints cannot be reassigned."""
        edge = Edge("A", "B", "x")
        with pytest.raises(AttributeError):
            edge.source = "C"

    def test_str(self):
        """Test the textual form."""
        assert str(Edge("A", "B", "x")) == "A -[x]-> B"
        assert repr(Edge("A", "B", 1)) == "Edge(source='A', destination='B', label=1)"


class TestErrors:
    """Tests for the error taxonomy."""

    def test_invalid_value_is_value_error(self):
        """Test that invalid values can be caught as ValueError."""
        with pytest.raises(ValueError):
            Vertex(None)

    def test_hierarchy(self):
        """Test that each error is a GraphError and the expected builtin."""
        assert issubclass(InvalidValueError, GraphError)
        assert issubclass(DuplicateVertexError, ValueError)
        assert issubclass(DuplicateEdgeError, ValueError)
        assert issubclass(NoSuchVertexError, LookupError)
        assert issubclass(NoSuchEdgeError, LookupError)

        error = NoSuchEdgeError("A", "B")
        assert isinstance(error, GraphError)
        assert (error.source, error.destination) == ("A", "B")
        assert "'A'" in str(error) and "'B'" in str(error)
