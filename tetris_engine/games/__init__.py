"""
Games module for the Tetris engine.
"""
