"""CEP (Brazilian postal code) parsing and validation."""

import re

_CEP_PATTERN = re.compile(r"[0-9]{8}")


def normalize_cep(raw: str) -> str:
    """Trim surrounding whitespace and drop hyphens ("01310-100" -> "01310100")."""
    return raw.strip().replace("-", "")


def is_valid_cep(cep: str) -> bool:
    """Return True iff ``cep`` is exactly 8 ASCII decimal digits."""
    return _CEP_PATTERN.fullmatch(cep) is not None
