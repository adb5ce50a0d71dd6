import sys
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent / "src"))


class FixedDataSource:
    """Deterministic stand-in for FakerDataSource."""

    def __init__(self, names=None, paragraphs=None, days_ago: int = 3) -> None:
        self._names = list(names or ["Ada Lovelace", "Grace Hopper"])
        self._paragraphs = list(
            paragraphs
            or [
                "First filler paragraph.",
                "Second filler paragraph.",
                "Third filler paragraph.",
            ]
        )
        self._days_ago = days_ago
        self.calls: list[str] = []

    def name(self) -> str:
        self.calls.append("name")
        return self._names[min(self.calls.count("name"), len(self._names)) - 1]

    def street_address(self) -> str:
        return "12 Analytical Way"

    def secondary_address(self) -> str:
        return "Suite 400"

    def postcode_city(self) -> str:
        return "10115 Springfield"

    def past_date(self, now: datetime) -> date:
        return now.date() - timedelta(days=self._days_ago)

    def paragraph(self) -> str:
        self.calls.append("paragraph")
        index = self.calls.count("paragraph") - 1
        return self._paragraphs[index % len(self._paragraphs)]


@pytest.fixture
def fixed_source() -> FixedDataSource:
    return FixedDataSource()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30)
