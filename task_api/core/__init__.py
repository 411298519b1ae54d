"""Core modules for the Task API."""
