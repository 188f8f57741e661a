"""
tree-noter: align or decorate the trailing comments of `tree` output.
"""

__version__ = "1.0.0"
