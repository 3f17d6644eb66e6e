"""
Application Layer for the fitness tracking API.

This package contains:
- ports/: Abstract interfaces (document store, identity provider)
- exceptions.py: Error taxonomy shared by every layer
- authorization.py: Pure role/ownership decision engine
- services/: One entity service per collection
- use_cases/: Multi-entity workflows (workout assembly)
"""
