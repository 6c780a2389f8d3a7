"""Composition Idioms - Root Package.

A small catalogue of object-composition idioms, each a self-contained unit:

Key Components:
    - domain.basket: encapsulated-state containers (module and revealing idioms)
    - domain.vehicle: constructor idiom and the tag-driven vehicle factory
    - infrastructure.patterns: process-wide single-instance access
    - config: configuration schemas and manager
    - infrastructure.logging: structured logging

The idioms do not interact at runtime; they share only configuration,
logging and the exception hierarchy.
"""

from ._version import __version__

__all__ = ["__version__"]
