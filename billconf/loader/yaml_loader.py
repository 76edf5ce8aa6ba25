"""
YAML Billing Configuration Loader

Reads the billing file from disk and turns it into a BillingConfig.

ERRORS (all propagated unchanged, never wrapped):
- OSError: the file is missing, unreadable or a directory
- yaml.YAMLError: the content is not well-formed YAML (or not decodable)
- pydantic.ValidationError: the YAML does not have the expected shape

DESIGN DECISION: There is no retry and no partial result. A load either
returns a complete BillingConfig or raises.
"""

from os import PathLike
from typing import Union

import yaml

from billconf.config import get_settings
from billconf.logs import get_logger
from billconf.models.billing import BillingConfig


logger = get_logger(__name__)


_KEPT_IMPLICIT_TAGS = {
    "tag:yaml.org,2002:null",
    "tag:yaml.org,2002:merge",
}


class TextScalarLoader(yaml.SafeLoader):
    """
    SafeLoader that keeps plain scalars as the text written in the file.
    
    Only nulls and merge keys are still resolved implicitly. A sort code
    of 040004 stays "040004" instead of becoming an octal int; numeric
    fields get their numbers from pydantic's string coercion.
    """


TextScalarLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag in _KEPT_IMPLICIT_TAGS
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_billing_config(text: Union[str, bytes]) -> BillingConfig:
    """
    Decode YAML text into a BillingConfig.
    
    Bytes are decoded by the YAML reader (UTF-8 or UTF-16 with BOM), so
    undecodable input raises yaml.YAMLError like any other malformed
    document. An empty document yields an all-empty config; missing keys
    are never an error.
    """
    raw = yaml.load(text, Loader=TextScalarLoader)
    if raw is None:
        return BillingConfig()
    return BillingConfig.model_validate(raw)


def load_billing_config(path: Union[str, PathLike]) -> BillingConfig:
    """
    Read and decode the billing file at `path`.
    
    The file handle is closed before this returns, whether or not the
    load succeeds.
    """
    logger.debug("billing_config_loading", path=str(path))
    try:
        with open(path, "rb") as fh:
            content = fh.read()
        config = parse_billing_config(content)
    except Exception as e:
        logger.warning(
            "billing_config_load_failed",
            path=str(path),
            error_type=type(e).__name__,
            error=str(e),
        )
        raise
    
    logger.info(
        "billing_config_loaded",
        path=str(path),
        billables=len(config.billables),
    )
    return config


def load_default_billing_config() -> BillingConfig:
    """Load the billing file named by BILLCONF_CONFIG_PATH."""
    return load_billing_config(get_settings().config_path)
