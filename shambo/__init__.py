"""
Shambo Package
==============

Deterministic simulation core for the rock/paper/scissors arena game.
A game's starting layout is derived from a publicly revealed seed, so any
third party can recompute it:

- Seeded MINSTD generator
- Object placement
- Wall-bounce physics step
- Completion and winner rules

All tunable parameters are in arena_config.yaml.
"""
