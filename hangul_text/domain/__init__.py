"""
Domain layer: pure Hangul text functions with no I/O.
"""
