"""
Hotel Voice Assistant Server Package.

This package contains the web server implementation for the hotel voice assistant.
It includes the API definition, configuration, realtime channel and service logic.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration, constants and security helpers.
    exception_handlers: Mapping of domain errors to HTTP responses.
    middleware: Request logging middleware.
    services: Business logic (orders, realtime fan-out, Vapi, e-mail).
"""
