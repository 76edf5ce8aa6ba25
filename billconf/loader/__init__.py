"""Billing configuration loading package."""

from billconf.loader.yaml_loader import (
    load_billing_config,
    load_default_billing_config,
    parse_billing_config,
)

__all__ = [
    "load_billing_config",
    "load_default_billing_config",
    "parse_billing_config",
]
