"""
Use cases for the users API.

Routers call these services instead of manipulating the JSON file directly.
"""
