"""
SmartSpin - pre-fill the optimal wager at the Stardew Valley Fair wheel.

Feed it your luck and the color you picked. Kelly does the rest.
"""

__version__ = "0.1.0"
