"""
Sprout - binding-form destructuring and source maps for a Lisp-family compiler
"""

__version__ = "0.1.0"
