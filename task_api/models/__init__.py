"""Database models for the Task API."""
