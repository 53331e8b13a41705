"""
FastAPI RESTful API for the Bookshelf record keeper.

This module provides a REST API for:
- Adding, listing, reading, editing and deleting books
- Filtering book listings by name, reading and finished flags
- Health and statistics endpoints
"""
