"""Contracts shared across layers.

This package defines the abstract interfaces that concrete
implementations in the infrastructure layer fulfil:
- Packer: the placement engine contract
"""

from .packer import Packer

__all__ = ["Packer"]
