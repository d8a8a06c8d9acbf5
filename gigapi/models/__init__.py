"""
Database models package.
"""

from gigapi.models.gig import Gig

__all__ = ["Gig"]
