"""
Users bounded context — domain layer.

This module contains all domain logic for the users context:
- The User entity
- Input validation rules
- The repository port and its error kinds
"""
