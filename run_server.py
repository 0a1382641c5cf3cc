#!/usr/bin/env python
"""
Run the API Server

Starts the FastAPI server for Google Maps business extraction.

Usage:
    GOOGLE_MAPS_API_KEY=... python run_server.py

The server runs on http://localhost:8000

Endpoints:
    GET  /api/health   - Health check
    POST /api/extract  - Search, enrich and download an .xlsx file
"""

from maps_extract.server import run_server

if __name__ == "__main__":
    run_server()
