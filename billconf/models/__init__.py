"""
Data Models Package

This package contains the Pydantic models for the billing configuration.
Everything read from the YAML file conforms to these schemas.
"""

from billconf.models.billing import (
    BankDetails,
    BillableItem,
    BillDetails,
    BillingConfig,
    BillToDetails,
    BusinessDetails,
)

__all__ = [
    "BankDetails",
    "BillableItem",
    "BillDetails",
    "BillingConfig",
    "BillToDetails",
    "BusinessDetails",
]
