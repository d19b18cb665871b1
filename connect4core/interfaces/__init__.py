"""
connect4core.interfaces - Command-line entry points for connect4core
"""

# Don't import anything here to avoid circular imports
__all__ = []
