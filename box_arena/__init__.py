"""
Box Arena Package
=================

Two-player token-absorption game played over four scoring boxes.

- core: boxes, box collection, turn engine, game runner and scoring
- evaluation: command-line harness and reference scenario bank

The box layout in game_config.yaml is fixed by the game design and is
validated on load.
"""
