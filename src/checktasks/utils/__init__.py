"""
Utility modules for checktasks
"""

from .validators import InputValidator

__all__ = ['InputValidator']
