"""API routers for the Task API."""
