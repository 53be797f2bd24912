"""
Daily Pulse schemas
Records mirrored from the hosted store (businesses, settings, daily entries).
"""

from .entries import Business, BusinessSettings, DailyEntry, InsightLevel

__all__ = ["Business", "BusinessSettings", "DailyEntry", "InsightLevel"]
