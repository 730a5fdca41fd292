"""
SmashCore Configuration Management
===================================

Centralized configuration for the toolkit using Python dataclasses and
TOML-based persistence.

Configuration is kept separate from code (Twelve-Factor App): every
tunable heuristic of the Kasiski and key-recovery analyses lives here.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class VigenereConfig:
    """Configuration for the Vigenere cryptanalysis engine.

    Parameters governing Kasiski examination and chi-squared key
    recovery.

    Attributes:
        minimum_key_length: Smallest factor accepted as the suggested key
            length. Factors below it are skipped when picking the first
            candidate (``4`` rejects trivially short keys; ``1`` accepts
            the top-ranked factor whatever its value).
        candidate_options: Ranked letters kept per key column (1-26).
        max_substring_length: Upper bound on the repeated-substring length
            searched by Kasiski examination. ``0`` means unbounded.
        max_text_length: Longest text accepted by Kasiski examination.
            ``0`` disables the limit.
        kasiski_enabled: When ``False`` key recovery without an explicit
            length assumes a simple substitution (length 1).

    Reference:
        Kasiski, F. W. (1863). Die Geheimschriften und die
        Dechiffrir-Kunst. Berlin: E. S. Mittler und Sohn.
    """

    minimum_key_length: int = 4
    candidate_options: int = 3
    max_substring_length: int = 0
    max_text_length: int = 20_000
    kasiski_enabled: bool = True
    output_format: str = "console"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destinations."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class SmashConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = SmashConfig.load()                  # from default path
        >>> config = SmashConfig.load("custom.toml")     # from custom path
        >>> print(config.vigenere.minimum_key_length)
        4
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    vigenere: VigenereConfig = field(default_factory=VigenereConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> SmashConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`SmashConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            vigenere=cls._build_section(VigenereConfig, raw.get("vigenere", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that newer config
        files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> SmashConfig:
    """Module-level convenience wrapper around :meth:`SmashConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = SmashConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
