"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_i18n_context,
    make_message_table,
    make_message_table_data,
    make_template_parts,
    make_translator,
)

__all__ = [
    "make_i18n_context",
    "make_message_table",
    "make_message_table_data",
    "make_template_parts",
    "make_translator",
]
