"""
Persistence adapters.

Services depend on these modules instead of touching the JSON file directly.
"""
