"""Canonical test fixtures used across engine and API tests.

Fixtures: the calculator's default loan ($100K, 8.5%, 12 months), a $400K
30-year mortgage at 7%, and a zero-interest $120K loan over 12 months.
"""

import pytest

from src.config import Settings
from src.models.loan import LoanTerms


@pytest.fixture
def default_loan() -> LoanTerms:
    """The calculator's reset values."""
    return LoanTerms(principal=100000, annual_rate_percent=8.5, term_months=12)


@pytest.fixture
def mortgage() -> LoanTerms:
    """$400K at 7% for 30 years."""
    return LoanTerms(principal=400000, annual_rate_percent=7, term_months=360)


@pytest.fixture
def zero_rate_loan() -> LoanTerms:
    """Interest-free $120K over a year."""
    return LoanTerms(principal=120000, annual_rate_percent=0, term_months=12)


@pytest.fixture
def calculator_settings() -> Settings:
    return Settings(max_term_months=360, max_annual_rate_percent=50.0)
