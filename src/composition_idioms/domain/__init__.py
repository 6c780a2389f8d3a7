"""
Domain Layer - one bounded context per idiom family

- core/: Shared kernel with the exception hierarchy
- basket/: Encapsulated-state containers (module and revealing idioms)
- vehicle/: Constructor idiom and the vehicle factory
"""
