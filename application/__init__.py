"""
Application Layer for the Exercise Tracker API.

This package contains:
- ports/: Abstract repository and store interfaces
- use_cases/: Workflows for registering users, logging exercises and reading logs
- exceptions.py: Error taxonomy mapped to HTTP responses by the API layer
- validation.py: Request value validation shared by the use cases
"""
