"""
Billing Configuration Models

These models mirror the YAML billing file one-to-one. They are designed to:
1. Accept any subset of keys (missing keys fall back to empty values)
2. Be immutable once loaded
3. Project line items and bank details into display rows for a renderer

DESIGN DECISION: No business validation happens here. Unknown currency
codes, negative quantities or odd e-mail addresses are accepted as-is.
The only checks are the ones implied by the field types.

YAML keys use the same snake_case names as the fields below, so the field
names are the mapping.
"""

from datetime import date, datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from billconf.formatting import format_money, format_quantity


class _ConfigSection(BaseModel):
    """
    Base for every section of the billing file.
    
    The loader hands over plain scalars as text, so only nulls need
    mapping there. Records built directly from Python values may still
    carry ints, dates or booleans in text fields; those are coerced
    before pydantic's own validation runs.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")
    
    @field_validator('*', mode='before')
    @classmethod
    def coerce_yaml_scalar(cls, v: Any, info: ValidationInfo) -> Any:
        """Map YAML nulls to empty values and scalars to their text."""
        annotation = cls.model_fields[info.field_name].annotation
        if annotation is str:
            if v is None:
                return ""
            if isinstance(v, (date, datetime)):
                return v.isoformat()
            if isinstance(v, bool):
                return "true" if v else "false"
            if isinstance(v, (int, float)):
                return str(v)
        elif annotation is float:
            if v is None:
                return 0.0
        return v


# =============================================================================
# PARTY DETAILS
# =============================================================================

class BusinessDetails(_ConfigSection):
    """The issuing business, shown in the invoice header."""
    
    name: str = ""
    person: str = ""
    address: str = ""
    image_file: str = Field(
        default="",
        description="Path to the logo image"
    )


class BillDetails(_ConfigSection):
    """Metadata about the bill itself."""
    
    department: str = ""
    currency: str = Field(
        default="",
        description="Currency code, not validated"
    )
    payment_terms: str = ""
    due_date: str = Field(
        default="",
        description="Free-form due date text, never parsed"
    )


class BillToDetails(_ConfigSection):
    """The recipient of the bill."""
    
    email: str = ""
    name: str = ""
    street: str = ""
    city_state_zip: str = ""
    country: str = ""


# =============================================================================
# LINE ITEMS
# =============================================================================

class BillableItem(_ConfigSection):
    """
    One invoice line.
    
    The total is never stored; it is recomputed from unit price and
    quantity every time it is read.
    """
    
    quantity: float = 0.0
    description: str = ""
    unit_price: float = 0.0
    currency: str = ""
    
    @property
    def total(self) -> float:
        """Unit price times quantity, unrounded."""
        return self.unit_price * self.quantity
    
    def to_row(self) -> list[str]:
        """
        Convert to a row suitable for an invoice table.
        
        Returns columns in order:
        [quantity, description, unit_price, total]
        
        Unit price and total are rounded independently, so the printed
        total is not guaranteed to equal printed quantity times printed
        unit price.
        """
        return [
            format_quantity(self.quantity),
            self.description,
            format_money(self.currency, self.unit_price),
            format_money(self.currency, self.total),
        ]


# =============================================================================
# SETTLEMENT
# =============================================================================

class BankDetails(_ConfigSection):
    """Bank transfer instructions printed at the bottom of the bill."""
    
    transfer_type: str = ""
    name: str = ""
    address: str = ""
    account_type: str = ""
    iban: str = ""
    sort_code: str = ""
    
    def to_row(self) -> list[str]:
        """
        Return the fields in declaration order for positional templates:
        [transfer_type, name, address, account_type, iban, sort_code]
        """
        return [
            self.transfer_type,
            self.name,
            self.address,
            self.account_type,
            self.iban,
            self.sort_code,
        ]


# =============================================================================
# AGGREGATE ROOT
# =============================================================================

class BillingConfig(BaseModel):
    """
    Everything needed to render one bill.
    
    Created once by the loader and read-only afterwards.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")
    
    business: BusinessDetails = Field(default_factory=BusinessDetails)
    bill: BillDetails = Field(default_factory=BillDetails)
    bill_to: BillToDetails = Field(default_factory=BillToDetails)
    billables: list[BillableItem] = Field(
        default_factory=list,
        description="Line items in display order"
    )
    bank: BankDetails = Field(default_factory=BankDetails)
    
    @field_validator('business', 'bill', 'bill_to', 'bank', mode='before')
    @classmethod
    def empty_section(cls, v: Any) -> Any:
        """A key present with no value is an empty section."""
        return {} if v is None else v
    
    @field_validator('billables', mode='before')
    @classmethod
    def empty_billables(cls, v: Any) -> Any:
        """A billables key with no value means no line items."""
        return [] if v is None else v
