"""Classification tables for Odia vowels, consonants, compounds and modifiers."""

from odiphone.tables.builtin import DEFAULT_TABLE_SET, TABLE_SETS, get_table_set
from odiphone.tables.loader import load_tables, tables_from_dict
from odiphone.tables.models import ModifierClasses, PhoneticTables

__all__ = [
    "DEFAULT_TABLE_SET",
    "TABLE_SETS",
    "ModifierClasses",
    "PhoneticTables",
    "get_table_set",
    "load_tables",
    "tables_from_dict",
]
