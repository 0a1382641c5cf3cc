"""
Extraction module for collecting business data.

- search.py: Paginated text search
- enrichment.py: Per-place details lookup
"""

from .search import execute_search, build_search_params, clamp_radius, fetch_places
from .enrichment import fetch_place_details, enrich_places
