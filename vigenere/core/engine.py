"""
Vigenere Analysis Engine
=========================

Central object of the toolkit.  A :class:`VigenereEngine` owns one
working text and key and coordinates the alphabet arithmetic, column
frequency scoring, Kasiski examination and chi-squared key recovery.

Architecture follows the Facade pattern (Gamma et al., 1994): callers
talk to the engine, the engine delegates to the individual analyzers.

State is only changed by the explicit operations ``set_text``,
``set_key``, ``reset``, ``encrypt`` and ``decrypt``; analyses never leave
partial results behind.

Key indexing follows character positions: a key letter is consumed by
every character, letters or not.  Punctuated ciphertexts produced by
tools that skip non-letters will therefore not decrypt cleanly.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns. Addison-Wesley.
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrir-Kunst.
    - Sinkov, A. (1966). Elementary Cryptanalysis. MAA.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from smashcore.config import SmashConfig
from smashcore.logger import SmashLogger

from vigenere.analyzers.frequency import FrequencyAnalyzer
from vigenere.analyzers.kasiski import KasiskiAnalyzer
from vigenere.analyzers.key_recovery import KeyRecovery
from vigenere.core.alphabet import LETTER_FREQUENCIES, decrypt_text, encrypt_text
from vigenere.core.errors import (
    NoCandidatesError,
    TextTooLongError,
    TypeMismatchError,
)
from vigenere.core.models import (
    ColumnFrequency,
    CrackResult,
    KasiskiResult,
    KeyLengthSource,
    KeySmashResult,
    Operation,
    TransformResult,
)

_IDENTITY_KEY = " "


def _require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError(name, value)
    return value


class VigenereEngine:
    """Encrypts, decrypts and breaks repeating-key (Vigenere) ciphers.

    Usage::

        engine = VigenereEngine("ATTACK AT DAWN", "LEMON")
        ciphertext = engine.encrypt()

        engine = VigenereEngine(ciphertext)
        kasiski = engine.kasiski_examination()
        smash = engine.smash_key(kasiski.first_key_length)
        plaintext = engine.decrypt(smash.first_key)

    Attributes:
        config: Toolkit configuration.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        text: str = "",
        key: Optional[str] = None,
        *,
        config: Optional[SmashConfig] = None,
        letter_frequencies: Mapping[str, float] = LETTER_FREQUENCIES,
        logger: Optional[SmashLogger] = None,
    ) -> None:
        self.config = config or SmashConfig()
        self.logger = logger or SmashLogger.from_config("vigenere.engine", self.config)
        self._letter_frequencies = letter_frequencies

        settings = self.config.vigenere
        self._frequency_analyzer = FrequencyAnalyzer(letter_frequencies)
        self._kasiski_analyzer = KasiskiAnalyzer(
            minimum_key_length=settings.minimum_key_length,
            max_substring_length=settings.max_substring_length,
            logger=self.logger,
        )
        self._key_recovery = KeyRecovery(letter_frequencies, logger=self.logger)

        self._key = _IDENTITY_KEY
        self.set_key(key)
        self._text = (_require_str("text", text) or _IDENTITY_KEY).upper()
        self.plaintext = self._text
        self.ciphertext = self._text

    # ------------------------------------------------------------------ #
    #  State
    # ------------------------------------------------------------------ #

    @property
    def text(self) -> str:
        """Working text every operation reads."""
        return self._text

    @property
    def key(self) -> str:
        """Stored key (``" "`` when unset, which encrypts to identity)."""
        return self._key

    @property
    def letter_frequencies(self) -> Mapping[str, float]:
        """Read-only expected English letter frequencies."""
        return self._letter_frequencies

    def set_text(self, text: str) -> None:
        """Replace the working text (uppercased).

        The plaintext / ciphertext outputs keep their previous values
        until :meth:`reset`, :meth:`encrypt` or :meth:`decrypt`.
        """
        self._text = _require_str("text", text).upper()

    def set_key(self, key: Optional[str]) -> None:
        """Store *key* uppercased; an empty or missing key means identity."""
        if key is not None:
            _require_str("key", key)
        self._key = (key or _IDENTITY_KEY).upper()

    def reset(self) -> None:
        """Discard the last encryption / decryption hypothesis."""
        self.plaintext = self._text
        self.ciphertext = self._text

    # ------------------------------------------------------------------ #
    #  Encryption
    # ------------------------------------------------------------------ #

    def _resolve_key(self, key: Optional[str]) -> str:
        if key is not None:
            _require_str("key", key)
        return key.upper() if key else self._key

    def encrypt(self, key: Optional[str] = None) -> str:
        """Encrypt the working text and store the result as ciphertext.

        Args:
            key: Key for this call only; the stored key is used if omitted.
        """
        self.ciphertext = encrypt_text(self._text, self._resolve_key(key))
        return self.ciphertext

    def decrypt(self, key: Optional[str] = None) -> str:
        """Decrypt the working text and store the result as plaintext.

        Args:
            key: Key for this call only; the stored key is used if omitted.
        """
        self.plaintext = decrypt_text(self._text, self._resolve_key(key))
        return self.plaintext

    def transform(self, operation: Operation, key: Optional[str] = None) -> TransformResult:
        """Run :meth:`encrypt` or :meth:`decrypt` and describe the call."""
        used_key = self._resolve_key(key)
        if operation is Operation.ENCRYPT:
            output = self.encrypt(used_key)
        else:
            output = self.decrypt(used_key)
        return TransformResult(
            operation=operation,
            key=used_key,
            input_text=self._text,
            output_text=output,
        )

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def frequencies(
        self, columns: int = 1, text: Optional[str] = None
    ) -> list[ColumnFrequency]:
        """Letter proportions and chi-squared score per key column.

        Args:
            columns: Number of key columns (1 = whole text).
            text: Text to analyse instead of the working text.
        """
        if text is None:
            text = self._text
        return self._frequency_analyzer.analyze(_require_str("text", text), columns)

    def kasiski_examination(self) -> KasiskiResult:
        """Kasiski examination of the working text.

        Raises:
            TextTooLongError: If the text exceeds ``max_text_length``.
            NoCandidatesError: If no key length can be suggested.
        """
        limit = self.config.vigenere.max_text_length
        if limit and len(self._text) > limit:
            raise TextTooLongError(
                f"Text has {len(self._text)} characters; Kasiski examination "
                f"is limited to {limit}"
            )
        return self._kasiski_analyzer.analyze(self._text)

    def _key_length(
        self, length: Optional[int]
    ) -> tuple[int, KeyLengthSource, Optional[KasiskiResult]]:
        if length is not None:
            return length, KeyLengthSource.EXPLICIT, None
        if not self.config.vigenere.kasiski_enabled:
            return 1, KeyLengthSource.FALLBACK, None
        try:
            kasiski = self.kasiski_examination()
        except (NoCandidatesError, TextTooLongError) as exc:
            self.logger.warning(
                "Falling back to key length 1 (simple substitution): %s", exc
            )
            return 1, KeyLengthSource.FALLBACK, None
        return kasiski.first_key_length, KeyLengthSource.KASISKI, kasiski

    def smash_key(
        self, length: Optional[int] = None, options: Optional[int] = None
    ) -> KeySmashResult:
        """Rank candidate key letters for the working text.

        Args:
            length: Key length.  If omitted, Kasiski's suggestion is used,
                or 1 when Kasiski is disabled or yields no suggestion
                (texts over ``max_text_length`` included).
            options: Candidates kept per column (default from config).
        """
        key_length, _, _ = self._key_length(length)
        if options is None:
            options = self.config.vigenere.candidate_options
        return self._key_recovery.smash(self._text, key_length, options)

    def crack(
        self, length: Optional[int] = None, options: Optional[int] = None
    ) -> CrackResult:
        """Run Kasiski, key recovery and decryption in one go.

        The best key is decrypted into :attr:`plaintext`; the stored key is
        left untouched.
        """
        key_length, source, kasiski = self._key_length(length)
        if options is None:
            options = self.config.vigenere.candidate_options
        smash = self._key_recovery.smash(self._text, key_length, options)
        plaintext = self.decrypt(smash.first_key)
        return CrackResult(
            key_length=key_length,
            key_length_source=source,
            key=smash.first_key,
            plaintext=plaintext,
            kasiski=kasiski,
            smash=smash,
        )
