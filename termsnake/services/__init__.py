"""
Services around the game engine: terminal I/O and high score persistence.
"""
