"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to the outside world:
- Snapshot exports (plain text files)
- Console rendering (fixed-width tables)
"""
