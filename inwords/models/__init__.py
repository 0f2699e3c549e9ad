"""Models package marker.

Value types shared by the formatting utilities and the word services.
"""
