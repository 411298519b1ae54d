"""Pydantic schemas for the Task API."""
