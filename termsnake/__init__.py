"""
termsnake - a wrap-around snake game for the terminal.
"""

__version__ = "0.1.0"
