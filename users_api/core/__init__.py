"""
Core utilities shared across the users API.

Configuration, logging setup and HTTP middleware live here so routers and
services do not read os.environ or touch handlers directly.
"""
