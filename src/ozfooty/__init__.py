"""
OzFooty – Poisson match outcome predictor for Australian football leagues.
"""

__version__ = "0.1.0"
