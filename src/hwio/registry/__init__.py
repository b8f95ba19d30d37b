"""
Registry of live I/O instances.
"""

from hwio.registry.registry import Registry

__all__ = ["Registry"]
