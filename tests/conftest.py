"""Shared fixtures for billconf tests."""

import pytest

from billconf.config import get_settings


SAMPLE_BILLING_YAML = """\
business:
  name: Acme Consulting Ltd
  person: Jane Doe
  address: 1 Market Street, London
  image_file: assets/logo.png

bill:
  department: Engineering
  currency: GBP
  payment_terms: Net 30
  due_date: 2024-01-31

bill_to:
  email: accounts@example.com
  name: Example Corp
  street: 42 Side Road
  city_state_zip: Springfield, IL 62704
  country: USA

billables:
  - quantity: 10
    description: Consulting hours
    unit_price: 150.5
    currency: GBP
  - quantity: 1
    description: Travel
    unit_price: 1234.5
    currency: GBP

bank:
  transfer_type: International
  name: Acme Consulting Ltd
  address: 99 Bank Lane, London
  account_type: Business Checking
  iban: GB82WEST12345698765432
  sort_code: 12-34-56
"""


@pytest.fixture
def sample_yaml() -> str:
    return SAMPLE_BILLING_YAML


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a file in tmp_path and return its path."""
    def _write(text: str, name: str = "billing.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
