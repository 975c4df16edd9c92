"""
Medilocker authentication and activity audit service.
"""
__version__ = "1.0.0"
