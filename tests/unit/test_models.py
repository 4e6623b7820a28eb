"""Tests for column models."""

import logging
from dataclasses import dataclass

import pytest

from tablestream.exceptions import ValidationError
from tablestream.models import Column, header_texts


@dataclass
class City:
    name: str
    population: int


class TestColumn:
    """Tests for Column construction and formatting."""

    def test_defaults(self) -> None:
        """Columns are auto-sized with a one-character minimum."""
        column = Column()
        assert column.header == ""
        assert column.width is None
        assert column.min_width == 1
        assert column.fixed is False

    def test_fixed(self) -> None:
        """Declaring a width makes the column fixed."""
        assert Column(width=0).fixed is True

    def test_negative_width_rejected(self) -> None:
        """A fixed width must be non-negative."""
        with pytest.raises(ValidationError, match="width"):
            Column(width=-1)

    def test_negative_min_width_rejected(self) -> None:
        """min_width must be non-negative."""
        with pytest.raises(ValidationError, match="min_width"):
            Column(min_width=-3)

    def test_immutable(self) -> None:
        """Columns cannot be changed after creation."""
        column = Column(header="id")
        with pytest.raises(AttributeError):
            column.header = "other"  # type: ignore[misc]

    def test_format_with_formatter(self) -> None:
        """The formatter result is converted to text."""
        column = Column(formatter=lambda c: c.population)
        assert column.format(City("Lima", 10_850_000), 0) == "10850000"

    def test_format_positional(self) -> None:
        """Without a formatter the value at the column index is used."""
        assert Column().format(("a", 2, None), 2) == "None"

    def test_format_single_line(self) -> None:
        """Line breaks and tabs become spaces."""
        column = Column(formatter=lambda r: "two\nlines\tand\r\ntab")
        assert column.format(None, 0) == "two lines and  tab"

    def test_formatter_failure_uses_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        """A raising formatter yields the fallback text and a warning."""
        column = Column(header="ratio", formatter=lambda r: r["a"] / r["b"], fallback="n/a")

        with caplog.at_level(logging.WARNING, logger="tablestream.models"):
            assert column.format({"a": 1, "b": 0}, 0) == "n/a"

        assert "ratio" in caplog.text

    def test_unprintable_value_uses_fallback(self) -> None:
        """A value whose str() raises yields the fallback text."""

        class Unprintable:
            def __str__(self) -> str:
                raise ValueError("cannot render")

        column = Column(formatter=lambda r: Unprintable(), fallback="n/a")
        assert column.format(None, 0) == "n/a"

    def test_unprintable_positional_value_uses_fallback(self) -> None:
        """Positional values are guarded the same way."""

        class Unprintable:
            def __str__(self) -> str:
                raise ValueError("cannot render")

        assert Column().format((Unprintable(),), 0) == "?"

    def test_fallback_is_single_line(self) -> None:
        """Line breaks in the fallback text become spaces."""
        column = Column(formatter=lambda r: 1 / 0, fallback="bad\nvalue")
        assert column.format(None, 0) == "bad value"


class TestColumnFactories:
    """Tests for Column.attr() and Column.key()."""

    def test_attr(self) -> None:
        """attr() reads an attribute and uses its name as header."""
        column = Column.attr("name")
        assert column.header == "name"
        assert column.format(City("Lagos", 1), 0) == "Lagos"

    def test_attr_with_format(self) -> None:
        """fmt is applied with str.format()."""
        column = Column.attr("population", fmt="{:,}", header="Population")
        assert column.header == "Population"
        assert column.format(City("Lagos", 21_320_000), 0) == "21,320,000"

    def test_attr_scientific_format(self) -> None:
        """Numeric format specs pass straight through."""
        column = Column.attr("population", fmt="{:.2e}")
        assert column.format(City("Lagos", 21_320_000), 0) == "2.13e+07"

    def test_key_mapping(self) -> None:
        """key() reads mapping keys."""
        column = Column.key("country", width=10)
        assert column.header == "country"
        assert column.width == 10
        assert column.format({"country": "Peru"}, 5) == "Peru"

    def test_key_index(self) -> None:
        """key() with an int reads sequence indices, header is the index."""
        column = Column.key(1)
        assert column.header == "1"
        assert column.format(("a", "b"), 0) == "b"

    def test_missing_attribute_falls_back(self) -> None:
        """Missing attributes go through the fallback path."""
        assert Column.attr("nope").format(City("Lima", 1), 0) == "?"


class TestHeaderTexts:
    """Tests for header_texts()."""

    def test_header_texts(self) -> None:
        """Headers are returned as single-line texts in column order."""
        columns = [Column(header="a"), Column(header="multi\nline")]
        assert header_texts(columns) == ("a", "multi line")
