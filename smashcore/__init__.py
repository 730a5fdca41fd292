"""
SmashCore Shared Module
=======================

Common utilities and configuration management shared by the Vigenere
cryptanalysis toolkit: configuration, structured logging, Rich console
helpers and NumPy-backed statistics.
"""

from smashcore.config import SmashConfig, get_config

__all__ = ["SmashConfig", "get_config"]
