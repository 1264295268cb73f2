"""Rule-based topical classification of claims."""

import re

from claimcheck.data import Category

# Evaluated top to bottom; the first matching rule decides the category.
CATEGORY_RULES: tuple[tuple[re.Pattern[str], Category], ...] = (
    (
        re.compile(
            r"\b(?:scientific|stud(?:y|ies)|research|scientists?|evidence|peer-?review(?:ed)?"
            r"|journal|experiment|data-?driven|empirical|hypothesis)\b",
            re.IGNORECASE,
        ),
        Category.SCIENTIFIC,
    ),
    (
        re.compile(
            r"\b(?:health|medical|diseases?|illnesses?|treatments?|cures?|medicine|doctors?"
            r"|physicians?|patients?|vaccines?|vaccination|autism|infections?|viruses?"
            r"|pandemic|diagnos(?:e|is)|symptoms?|clinics?|hospitals?|vitamins?)\b",
            re.IGNORECASE,
        ),
        Category.MEDICAL_HEALTH,
    ),
    (
        re.compile(
            r"\b(?:government|officials?|politic|policies|policy|law|regulations?|election"
            r"|bill|senate|congress|minister|president|legislation|vote|campaign)\b",
            re.IGNORECASE,
        ),
        Category.POLITICAL,
    ),
    (
        re.compile(
            r"\b(?:gdp|econom(?:y|ic)|inflation|market|stock|housing|unemployment|jobs?"
            r"|recession|dollar|cost|price|tax|budget)\b|\$",
            re.IGNORECASE,
        ),
        Category.ECONOMIC,
    ),
    (
        re.compile(
            r"\b(?:global\s+warming|climate\s+change|greenhouse|emissions?|co2"
            r"|carbon\s+dioxide|sea\s+level|hurricane|drought|rainfall|precipitation"
            r"|heatwave|ice\s+melt|temperatures?|arctic|weather|melting)\b",
            re.IGNORECASE,
        ),
        Category.CLIMATE_WEATHER,
    ),
    (
        re.compile(
            r"\b(?:century|decade|historical|history|war|era|battle|ancient|medieval|ago)\b"
            # years 1500-2019
            r"|\b(?:1[5-9]\d{2}|20[01]\d)\b"
            # decades: "2000s", "60s"
            r"|\b(?:\d{4}|\d{2})s\b",
            re.IGNORECASE,
        ),
        Category.HISTORICAL,
    ),
)


def classify_claim(text: str) -> Category:
    """Return the category of the first rule matching ``text``.

    Falls back to ``Category.GENERAL`` when nothing matches, including for
    empty input.
    """
    for pattern, category in CATEGORY_RULES:
        if pattern.search(text):
            return category
    return Category.GENERAL
