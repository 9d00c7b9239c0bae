"""
Pydantic schema definitions for API payloads.

``pokemon`` defines the catalog record together with the request and
response bodies built around it.
"""
