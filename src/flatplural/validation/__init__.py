"""Validation of flat message mappings against locale plural rules.

Python 3.13+. Depends on Babel for CLDR data.
"""

from .coverage import check_plural_coverage

__all__ = ["check_plural_coverage"]
