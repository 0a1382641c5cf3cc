"""
Geographic utilities module.

- geocoding.py: Location bias lookup via the Google Geocoding API
"""

from .geocoding import geocode_location
