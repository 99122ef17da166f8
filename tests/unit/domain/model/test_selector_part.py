"""Tests for domain/model/selector_part.py."""

import pytest

from selectorkit.domain.model.part_kind import SelectorPartKind
from selectorkit.domain.model.selector_part import SelectorPart


class TestSelectorPartCreation:
    """Tests for valid SelectorPart creation."""

    def test_fragment(self) -> None:
        part = SelectorPart(kind=SelectorPartKind.ATTRIBUTE, value='href$=".png"')
        assert part.fragment == '[href$=".png"]'
        assert str(part) == '[href$=".png"]'

    def test_value_content_not_validated(self) -> None:
        part = SelectorPart(kind=SelectorPartKind.ID, value="not a valid id!")
        assert part.fragment == "#not a valid id!"

    def test_is_frozen(self) -> None:
        part = SelectorPart(kind=SelectorPartKind.CLASS, value="x")
        with pytest.raises(AttributeError):
            part.value = "y"  # type: ignore[misc]


class TestSelectorPartFailFirst:
    """Tests for FAIL-FIRST validation in SelectorPart."""

    def test_non_kind_raises(self) -> None:
        with pytest.raises(TypeError, match="kind must be SelectorPartKind"):
            SelectorPart(kind="class", value="x")  # type: ignore[arg-type]

    def test_non_str_value_raises(self) -> None:
        with pytest.raises(TypeError, match="value must be str, got int"):
            SelectorPart(kind=SelectorPartKind.CLASS, value=1)  # type: ignore[arg-type]
