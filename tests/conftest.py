"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from docmark.tables.schema import TableFragment

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def make_fragment():
    """Factory for TableFragment objects with sensible merge-candidate defaults."""

    def _make(**overrides) -> TableFragment:
        fields = {
            "content": "",
            "start_pos": 0,
            "end_pos": 0,
            "has_header": False,
            "is_complete": False,
            "at_content_start": True,
            "at_content_end": True,
            "column_count": 2,
            "headers": None,
            "data_rows": [],
        }
        fields.update(overrides)
        return TableFragment(**fields)

    return _make
