"""Tests for rule-based claim classification."""

import pytest

from claimcheck.classifier import CATEGORY_RULES, classify_claim
from claimcheck.data import Category


@pytest.mark.parametrize(
    "claim",
    [
        "Vaccines cause autism in children.",
        "Taking vitamin C prevents the common cold.",
        "The new treatment has cured 90% of patients in the trial.",
        "Doctors recommend drinking 8 glasses of water daily.",
        "The pandemic has infected over 1 million people worldwide.",
    ],
)
def test_medical_claims(claim: str) -> None:
    assert classify_claim(claim) == Category.MEDICAL_HEALTH


@pytest.mark.parametrize(
    "claim",
    [
        "Global warming has increased average temperatures by 2°C.",
        "Climate change is causing more frequent hurricanes.",
        "The weather patterns have shifted dramatically in the past decade.",
        "Arctic ice is melting at an unprecedented rate.",
        "Temperature records were broken last summer.",
    ],
)
def test_climate_claims(claim: str) -> None:
    assert classify_claim(claim) == Category.CLIMATE_WEATHER


@pytest.mark.parametrize(
    "claim",
    [
        "The Berlin Wall fell in 1989.",
        "The 60s were a time of social revolution.",
        "In the 18th century, the industrial revolution began.",
        "The 2000s saw the rise of social media.",
        "The last decade has seen unprecedented technological growth.",
    ],
)
def test_historical_claims(claim: str) -> None:
    assert classify_claim(claim) == Category.HISTORICAL


@pytest.mark.parametrize(
    "claim",
    [
        "The stock market has grown by $2 trillion this year.",
        "Housing prices have increased by 15% since last year.",
        "The cost of living has doubled in the past decade.",
        "The economy has created 200,000 new jobs.",
        "The dollar has strengthened against foreign currencies.",
    ],
)
def test_economic_claims(claim: str) -> None:
    assert classify_claim(claim) == Category.ECONOMIC


@pytest.mark.parametrize(
    "claim",
    [
        "A new study shows that coffee may reduce the risk of heart disease.",
        "Scientists have discovered a new species of frog in the Amazon.",
        "Research indicates that exercise improves cognitive function.",
        "Evidence suggests that dark matter makes up 85% of the universe.",
        "The scientific consensus is that vaccines are safe and effective.",
    ],
)
def test_scientific_claims(claim: str) -> None:
    assert classify_claim(claim) == Category.SCIENTIFIC


@pytest.mark.parametrize(
    "claim",
    [
        "The government has increased spending on healthcare by 10%.",
        "New regulations will reduce carbon emissions by 30%.",
        "The policy change will affect 2 million citizens.",
        "The law was passed with bipartisan support.",
        "Government officials have denied the allegations.",
    ],
)
def test_political_claims(claim: str) -> None:
    assert classify_claim(claim) == Category.POLITICAL


@pytest.mark.parametrize(
    "claim",
    [
        "The sky is blue.",
        "Water boils at 100 degrees Celsius.",
        "The Earth orbits the Sun.",
        "Humans need oxygen to survive.",
        "Cats are mammals.",
    ],
)
def test_unmatched_claims_are_general(claim: str) -> None:
    assert classify_claim(claim) == Category.GENERAL


def test_empty_string_is_general() -> None:
    assert classify_claim("") == Category.GENERAL


def test_case_insensitive() -> None:
    assert classify_claim("VACCINES ARE SAFE") == Category.MEDICAL_HEALTH
    assert classify_claim("vaccines are safe") == Category.MEDICAL_HEALTH
    assert classify_claim("Vaccines Are Safe") == Category.MEDICAL_HEALTH


@pytest.mark.parametrize(
    "claim",
    [
        "Research shows the economy is growing.",
        "The Berlin Wall fell in 1989.",
        "Climate change is causing more frequent hurricanes.",
        "Cats are mammals.",
    ],
)
def test_classification_ignores_case_and_is_stable(claim: str) -> None:
    expected = classify_claim(claim)
    assert classify_claim(claim) == expected
    assert classify_claim(claim.upper()) == expected
    assert classify_claim(claim.lower()) == expected


def test_scientific_wins_over_medical() -> None:
    """The Scientific rule is checked before Medical/Health."""
    assert classify_claim("A study of vaccine side effects in patients") == Category.SCIENTIFIC


def test_political_wins_over_climate() -> None:
    assert classify_claim("New policy targets carbon emissions") == Category.POLITICAL


def test_economic_wins_over_historical() -> None:
    assert classify_claim("Prices rose in 1990 because of a tax hike") == Category.ECONOMIC


def test_dollar_sign_alone_is_economic() -> None:
    assert classify_claim("It was sold for $500.") == Category.ECONOMIC


def test_matches_whole_words_only() -> None:
    # "healthcare" and "lawn" must not trigger "health" or "law"
    assert classify_claim("Healthcare workers mowed the lawn.") == Category.GENERAL


def test_years_outside_historical_range() -> None:
    assert classify_claim("Released in 2024.") == Category.GENERAL
    assert classify_claim("Built in 1492.") == Category.GENERAL


def test_rule_order() -> None:
    assert [category for _, category in CATEGORY_RULES] == [
        Category.SCIENTIFIC,
        Category.MEDICAL_HEALTH,
        Category.POLITICAL,
        Category.ECONOMIC,
        Category.CLIMATE_WEATHER,
        Category.HISTORICAL,
    ]
