"""Free-form mode text → ADIF mode vocabulary."""

from hamlog_adif.lookup import substitute

# Vendor / brand names → intermediate token.
MODE_SYNONYMS: tuple[tuple[str, str], ...] = (
    ("FREEDV", "DIGITALVOICE"),
    ("DV", "DIGITALVOICE"),
    ("D-STAR", "DSTAR"),
    ("FUSION", "DSTAR"),
)

# Specific protocols (including tokens produced above) → ADIF mode family.
MODE_CANONICAL: tuple[tuple[str, str], ...] = (
    ("FT4", "MFSK"),
    ("JS8", "MFSK"),
    ("C4FM", "DIGITALVOICE"),
    ("DMR", "DIGITALVOICE"),
    ("DSTAR", "DIGITALVOICE"),
)


def normalize_mode(mode_text: str) -> str:
    """Uppercase and rewrite known mode tokens. Never fails."""
    mode = mode_text.strip().upper()
    mode = substitute(mode, MODE_SYNONYMS)
    return substitute(mode, MODE_CANONICAL)
