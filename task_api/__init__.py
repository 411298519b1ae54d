"""Task API - CRUD REST service for tasks."""

__version__ = "1.0.0"
