"""
miniutils: small single-purpose command-line utilities.
"""

__version__ = "0.1.0"
