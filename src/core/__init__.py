"""
Core calendar engine: integer primitives, Gregorian rules, date values, weekday resolution.

This module contains the foundational building blocks that are independent
of any input/output layer (console, files, etc.).
"""
