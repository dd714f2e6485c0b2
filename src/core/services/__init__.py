"""
Business services for EnviroAI.

This package contains:
- geocoding.py: place-name lookup via Nominatim
- weather.py: current conditions and 7-day forecast via Open-Meteo
- places.py: nearby points of interest via Geoapify
- generation.py: deals and itineraries via the AI chat-completions gateway
- migration.py: Alembic upgrades run from a Lambda
"""

__all__: list[str] = []
