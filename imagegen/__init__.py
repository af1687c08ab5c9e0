"""
AI image generator backend.
Credit-metered image generation API with a small async client.
"""
__version__ = "0.1.0"
