"""
LiveLocale Utilities

Helper functions and constants.
"""

from livelocale.utils.events import Event, Subscription, LiveValue

__all__ = [
    "Event",
    "Subscription",
    "LiveValue",
]
