"""Tests for domain/exceptions/combinator.py."""

import pytest

from selectorkit.domain.exceptions.base import SelectorKitError
from selectorkit.domain.exceptions.combinator import InvalidCombinatorError


class TestInvalidCombinatorError:
    """Tests for InvalidCombinatorError exception."""

    def test_is_selectorkit_error(self) -> None:
        assert issubclass(InvalidCombinatorError, SelectorKitError)

    def test_has_combinator_attribute(self) -> None:
        assert InvalidCombinatorError(">>").combinator == ">>"

    def test_message_format(self) -> None:
        err = InvalidCombinatorError("|")
        assert str(err) == "Invalid combinator '|': expected one of ' ', '+', '~', '>'"

    def test_none_raises(self) -> None:
        with pytest.raises(TypeError, match="combinator must not be None"):
            InvalidCombinatorError(None)  # type: ignore[arg-type]
