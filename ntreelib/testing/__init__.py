"""Testing utilities for NTreeLib consumers."""

from .fixtures import build_tree, check_links

__all__ = ['build_tree', 'check_links']
