"""
Paddle Shooter, a small pygame arcade shooter
"""

__version__ = "0.1.0"
