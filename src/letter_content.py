from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol

from faker import Faker

from letter_settings import (
    LETTER_DATE_FORMAT,
    LETTER_PAST_DAYS,
    SUPPORTED_VARIANTS,
    VARIANT_DATED,
    VARIANT_SALUTATION,
)


PARAGRAPH_COUNT = 3
SENTENCES_PER_PARAGRAPH = 6


@dataclass(frozen=True)
class LetterContent:
    name: str
    address_lines: tuple[str, ...]
    paragraphs: tuple[str, ...]
    signature: str
    greeting: str | None = None
    date_line: str | None = None

    @property
    def opening_line(self) -> str:
        return self.date_line or self.greeting or ""


class LetterDataSource(Protocol):
    def name(self) -> str: ...

    def street_address(self) -> str: ...

    def secondary_address(self) -> str: ...

    def postcode_city(self) -> str: ...

    def past_date(self, now: datetime) -> date: ...

    def paragraph(self) -> str: ...


class FakerDataSource:
    """Placeholder letter data backed by Faker.

    Build one per invocation; pass `seed` only when the output must be reproducible.
    """

    def __init__(self, locale: str = "en_US", seed: int | None = None, past_days: int = LETTER_PAST_DAYS) -> None:
        self._faker = Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)
        self._past_days = max(1, past_days)

    def name(self) -> str:
        return self._faker.name()

    def street_address(self) -> str:
        return self._faker.street_address()

    def secondary_address(self) -> str:
        # Not every Faker locale ships a secondary address provider.
        try:
            return self._faker.secondary_address()
        except AttributeError:
            return f"Apt. {self._faker.building_number()}"

    def postcode_city(self) -> str:
        return f"{self._faker.postcode()} {self._faker.city()}"

    def past_date(self, now: datetime) -> date:
        today = now.date()
        return self._faker.date_between(
            start_date=today - timedelta(days=self._past_days),
            end_date=today - timedelta(days=1),
        )

    def paragraph(self) -> str:
        return self._faker.paragraph(nb_sentences=SENTENCES_PER_PARAGRAPH)


def normalize_variant(variant: str | None) -> str:
    normalized = (variant or VARIANT_SALUTATION).strip().lower() or VARIANT_SALUTATION
    if normalized not in SUPPORTED_VARIANTS:
        supported = ", ".join(sorted(SUPPORTED_VARIANTS))
        raise ValueError(f"Unsupported letter variant '{normalized}'. Supported variants: {supported}.")
    return normalized


def generate_letter_content(
    source: LetterDataSource,
    *,
    variant: str = VARIANT_SALUTATION,
    now: datetime | None = None,
    date_format: str = LETTER_DATE_FORMAT,
) -> LetterContent:
    selected_variant = normalize_variant(variant)
    now = now or datetime.now()

    name = source.name()
    address_lines = (
        source.street_address(),
        source.secondary_address(),
        source.postcode_city(),
    )

    greeting = None
    date_line = None
    if selected_variant == VARIANT_DATED:
        letter_date = source.past_date(now)
        if letter_date > now.date():
            raise ValueError(f"Letter date {letter_date.isoformat()} is after {now.date().isoformat()}.")
        date_line = letter_date.strftime(date_format)
    else:
        greeting = f"Dear {name},"

    paragraphs = tuple(source.paragraph() for _ in range(PARAGRAPH_COUNT))

    return LetterContent(
        name=name,
        address_lines=address_lines,
        paragraphs=paragraphs,
        signature=source.name(),
        greeting=greeting,
        date_line=date_line,
    )
