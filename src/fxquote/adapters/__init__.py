"""
Adapters Layer - External Interfaces

This package contains all adapters around the converter core:
- Sources (currency records from files or the built-in sample)
- Formatting (output)
"""

__all__ = []
