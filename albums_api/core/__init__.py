"""
Core utilities shared across the albums API.

This package hosts configuration (env vars, paths) and the logging setup.
Routers, services and repositories depend on these primitives instead of
reading os.environ or configuring handlers themselves.
"""
