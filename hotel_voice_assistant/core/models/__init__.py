"""
Shared models for the hotel voice assistant.

- ``domain``: enumerations and small value types used across layers.
- ``io``: Pydantic request/response schemas for the API.
"""
