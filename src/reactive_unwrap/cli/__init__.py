"""
CLI Command Modules

Each module contains a logical group of related commands.
"""

from reactive_unwrap.cli import migrate

__all__ = ['migrate']
