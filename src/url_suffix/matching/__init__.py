"""
Public suffix matching against a loaded rule table.
"""

from url_suffix.matching.matcher import DomainMatcher

__all__ = ["DomainMatcher"]
