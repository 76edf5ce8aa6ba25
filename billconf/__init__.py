"""
billconf - Billing Configuration Package

Loads the YAML description of a bill (who is billing, who is billed,
what is billed, where to pay) and turns amounts into display strings
for an invoice renderer.

DESIGN PRINCIPLES:
1. Load once, never mutate
2. Missing keys are not errors
3. Load failures propagate unchanged
4. A wrong monetary string is worse than a crash
"""

__version__ = "1.0.0"
__author__ = "billconf Team"
