"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request parsing and validation
- Response formatting
- Error handling
- Route definitions
"""
