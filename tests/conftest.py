"""Pytest fixtures for tablestream tests."""

import io

import pytest

from tablestream import Column, TableConfig


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory text sink."""
    return io.StringIO()


@pytest.fixture
def id_name_columns() -> list[Column]:
    """Fixed-width id column followed by an auto-sized name column."""
    return [
        Column(header="id", formatter=lambda r: r[0], width=4),
        Column(header="name", formatter=lambda r: r[1]),
    ]


@pytest.fixture
def wide_config() -> TableConfig:
    """Config with a wide, explicit width so no shrinking happens."""
    return TableConfig(threshold=2, max_width=200)
