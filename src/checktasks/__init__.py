"""
checktasks: locale completeness checks, locale machine translation
and duplicate gem version checks
"""

__version__ = '0.1.0'
