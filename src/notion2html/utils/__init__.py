#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/__init__.py
"""Helper functions for escaping, ids, paths, dates and external tools."""
