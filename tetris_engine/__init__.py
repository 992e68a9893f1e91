# Tetris Engine Source Package
"""
Tetris Engine - falling-block puzzle game core with a pygame front end.

Modules:
- core: Abstract interfaces for games and renderers
- games: Game implementations (Tetris)
- utils: Configuration and logging
"""
