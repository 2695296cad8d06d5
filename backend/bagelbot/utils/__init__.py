"""Utility functions and helpers."""

from bagelbot.utils.datetime_utils import business_day, business_day_bounds, to_api_timezone, utc_now

__all__ = [
    "business_day",
    "business_day_bounds",
    "to_api_timezone",
    "utc_now",
]
