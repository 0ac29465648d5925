"""Printer control language definitions."""

from enum import StrEnum

# Alternate spellings accepted by PrinterLanguage.parse
_ALIASES = {
    "esc/p": "escp",
    "esc/p2": "escp2",
    "zpl2": "zplii",
    "zpl ii": "zplii",
    "zpl-ii": "zplii",
    "epl ii": "epl2",
}


class PrinterLanguage(StrEnum):
    """Supported printer control languages."""

    ESCP = "escp"
    ESCP2 = "escp2"
    ZPL = "zpl"
    ZPLII = "zplii"
    EPL = "epl"
    EPL2 = "epl2"
    CPCL = "cpcl"

    @property
    def requires_width_multiple_of_8(self) -> bool:
        """Whether image rows must be byte aligned before encoding."""
        return self in (PrinterLanguage.EPL, PrinterLanguage.EPL2)

    @property
    def requires_bit_inversion(self) -> bool:
        """Whether the language treats a 0 bit as a printed (black) dot.

        EPL's GW command prints 0 bits, see
        https://support.zebra.com/cpws/docs/eltron/gw_command.htm
        """
        return self in (PrinterLanguage.EPL, PrinterLanguage.EPL2)

    @classmethod
    def parse(cls, value: "str | PrinterLanguage") -> "PrinterLanguage":
        """Look up a language by name, ignoring case and common spellings.

        Raises:
            ValueError: If the name matches no language.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        return cls(_ALIASES.get(name, name))
