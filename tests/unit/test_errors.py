"""
Unit tests for hofkit error types.
"""

from hofkit.utils.errors import (
    ElementLocation,
    HofkitError,
    InvalidArgumentError,
    UnwrapError,
)


class TestElementLocation:
    """Tests for location formatting."""

    def test_index(self):
        """Sequence locations show the index."""
        assert str(ElementLocation("map_seq", index=3)) == "map_seq[3]"

    def test_key(self):
        """Mapping locations show the key repr."""
        assert str(ElementLocation("filter_assoc", key="City 1")) == "filter_assoc['City 1']"

    def test_operation_only(self):
        """Scalar locations show just the operation."""
        assert str(ElementLocation("apply")) == "apply"


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """All hofkit errors share a base class."""
        assert issubclass(InvalidArgumentError, HofkitError)
        assert issubclass(UnwrapError, HofkitError)

    def test_message_without_location(self):
        """A plain error message is passed through."""
        assert str(HofkitError("boom")) == "boom"

    def test_invalid_argument_message(self):
        """The message names the location, element and cause."""
        cause = ValueError("nope")
        error = InvalidArgumentError(7, cause, ElementLocation("reduce_seq", index=0))
        assert str(error) == "[reduce_seq[0]] callback failed for element 7: ValueError: nope"
        assert error.element == 7
        assert error.cause is cause
