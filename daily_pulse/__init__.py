"""
Daily Pulse
Daily revenue and order tracking for small businesses, with rolling KPIs,
goal-pace projection and rule-based insights.
"""

__version__ = "1.0.0"
