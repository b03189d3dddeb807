"""
AngelaMos | 2025
__init__.py
"""
