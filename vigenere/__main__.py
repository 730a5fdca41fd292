"""
Vigenere Module Entry Point
============================

Allows running the CLI via: python -m vigenere
"""

from vigenere.cli import main

if __name__ == "__main__":
    main()
