"""
Padelo - Padel Doubles Rating Engine

Computes player ratings for a series of padel doubles tournaments using a
pairwise ELO variant with calibration, inactivity decay and margin-of-victory
weighting.

Main components:
- data: Tournament input records and JSON loading
- elo: Player store, rating calculation, tournament pipeline and leaderboard views
"""

__version__ = "1.0.0"
