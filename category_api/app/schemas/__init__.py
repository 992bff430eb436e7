"""
Pydantic schema definitions for API payloads.

Request bodies and response shapes are declared here so the route
handlers and the service layer share one definition of a category.
"""
