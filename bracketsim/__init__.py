"""
Bracket Simulator - seeded single-elimination tournament simulation.
"""
__version__ = "0.1.0"
