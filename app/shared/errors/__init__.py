"""
Shared error handling package.

Translates users domain errors and malformed-request errors into
JSON responses with a fixed shape and status code.
"""
