import pytest
from symbols import NO_VALUE, SymbolTable


def test_declare_and_lookup():
    table = SymbolTable()
    record = table.declare("agency12@r", "int", "5", line=3)
    assert table.lookup("agency12@r") is record
    assert record.declared_type == "int"
    assert record.initializer == "5"
    assert record.declared_at_line == 3


def test_missing_initializer_uses_placeholder():
    table = SymbolTable()
    assert table.declare("tokyo23@r", "void", line=1).initializer == NO_VALUE == "-"


def test_first_declaration_wins():
    table = SymbolTable()
    first = table.declare("agency12@r", "int", "5", line=1)
    again = table.declare("agency12@r", "float", "2.5", line=7)
    assert again is first
    assert len(table) == 1
    assert table.records()[0].declared_type == "int"
    assert table.records()[0].declared_at_line == 1


def test_records_keep_declaration_order():
    table = SymbolTable()
    for i, name in enumerate(["zeta12@r", "alpha12@r", "mike12@r"], start=1):
        table.declare(name, "int", line=i)
    assert [r.name for r in table] == ["zeta12@r", "alpha12@r", "mike12@r"]
    assert "alpha12@r" in table


def test_lookup_unknown_name():
    with pytest.raises(KeyError):
        SymbolTable().lookup("nobody12@r")


def test_line_numbers_are_positive():
    with pytest.raises(ValueError):
        SymbolTable().declare("agency12@r", "int", line=0)
