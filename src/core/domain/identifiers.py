"""
Identifiers — Идентификаторы участников (owners, targets, senders)

Идентификатор — непустая строка. Hex-адреса вида "0x..." нормализуются
в нижний регистр, чтобы "0xAB.." и "0xab.." считались одним участником.

Нулевой идентификатор (запрещён для owners):
- None
- пустая / пробельная строка
- "0x" + только нули (например, ZERO_ADDRESS)
- строка только из нулей ("0", "000")

Нестроковые значения (int и т.п.) идентификаторами не являются:
guards отклоняют их до нормализации.
"""

from typing import Final, Optional


# =============================================================================
# CONSTANTS
# =============================================================================


ZERO_ADDRESS: Final[str] = "0x" + "0" * 40

HEX_PREFIX: Final[str] = "0x"


# =============================================================================
# HELPERS
# =============================================================================


def normalize_identifier(identifier: Optional[str]) -> str:
    """
    Нормализация идентификатора.

    Args:
        identifier: сырой идентификатор

    Returns:
        Строка без пробелов по краям; hex-адреса в нижнем регистре.
        None превращается в пустую строку.
    """
    if identifier is None:
        return ""
    value = str(identifier).strip()
    if value[:2].lower() == HEX_PREFIX:
        return value.lower()
    return value


def is_identifier(identifier: object) -> bool:
    """True для строки (пустая строка тоже строка, см. is_zero_identifier)."""
    return isinstance(identifier, str)


def is_zero_identifier(identifier: Optional[str]) -> bool:
    """True для None, пустой строки, нулевого hex-адреса и строки из нулей."""
    value = normalize_identifier(identifier)
    if not value:
        return True
    if value.startswith(HEX_PREFIX):
        value = value[len(HEX_PREFIX):]
        if value == "":
            return True
    return set(value) == {"0"}
