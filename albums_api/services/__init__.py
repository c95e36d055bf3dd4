"""
High-level use cases for the albums API.

Each service module orchestrates repositories to implement the catalog rules.
Routers (FastAPI endpoints) call these services instead of manipulating the
JSON file directly.
"""
