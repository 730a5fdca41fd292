"""
Vigenere Analyzers
===================

Individual analysis modules: column frequency scoring, Kasiski
examination and chi-squared key recovery.
"""

from vigenere.analyzers.frequency import FrequencyAnalyzer
from vigenere.analyzers.kasiski import (
    KasiskiAnalyzer,
    kasiski_examination,
    recurrence_search,
)
from vigenere.analyzers.key_recovery import KeyRecovery, smash_key

__all__ = [
    "FrequencyAnalyzer",
    "KasiskiAnalyzer",
    "kasiski_examination",
    "recurrence_search",
    "KeyRecovery",
    "smash_key",
]
