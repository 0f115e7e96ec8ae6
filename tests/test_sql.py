import dataclasses

import pytest

from dialectkit.sql import Column, Table


def test_table_alias_is_reference_name():
    table = Table("orders")
    aliased = table.as_("o")
    assert table.reference_name == "orders"
    assert aliased.reference_name == "o"
    assert aliased.name == "orders"
    assert table.alias is None


def test_column_belongs_to_table():
    table = Table("orders")
    column = table.column("total")
    assert column == Column("total", table)
    assert column.as_("t").reference_name == "t"


def test_descriptors_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Table("orders").name = "other"


def test_empty_names_are_rejected():
    with pytest.raises(ValueError):
        Table("")
    with pytest.raises(ValueError):
        Column("")
