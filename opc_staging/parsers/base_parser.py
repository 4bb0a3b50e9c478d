"""Base parser for raw TNM code tokens."""

import logging
import math
import re
from typing import Any, ClassVar, Dict, Iterable, Optional, Set

logger = logging.getLogger(__name__)

# Characters ignored when comparing raw tokens
_IGNORED_CHARACTERS = re.compile(r"[\s\.\-_,;:'\"()\[\]/\\]+")

# Integer-valued decimal text as written by float columns (2.0, 1.00)
_WHOLE_DECIMAL = re.compile(r"(\d+)\.0+")

# Staging-basis prefixes that may precede the axis letter (cT2, pN1, ...)
BASIS_PREFIXES = ('', 'c', 'p')


def normalize_token(value: Any) -> str:
    """Case-fold a raw token and strip whitespace and punctuation.

    Args:
        value: Raw cell value (string, number, None or NaN)

    Returns:
        Normalized token, empty string for blank or missing values
    """
    if value is None:
        return ''
    if isinstance(value, float):
        if math.isnan(value):
            return ''
        if value.is_integer():
            value = int(value)
    text = str(value).strip()
    whole = _WHOLE_DECIMAL.fullmatch(text)
    if whole:
        text = whole.group(1)
    return _IGNORED_CHARACTERS.sub('', text).casefold()


class BaseCodeParser:
    """Map raw free-text tokens of one axis to canonical AJCC 7th codes.

    Subclasses declare ``AXIS`` (the axis letter), ``FORMAT_MAP`` (canonical
    code -> core forms written without the axis letter) and optionally
    ``SYNONYMS`` (canonical code -> free-text forms matched as-is).
    """

    AXIS: ClassVar[str] = ''
    FORMAT_MAP: ClassVar[Dict[str, Set[str]]] = {}
    SYNONYMS: ClassVar[Dict[str, Set[str]]] = {}

    def __init__(self):
        self._lookup = self._build_lookup()

    @classmethod
    def expand_forms(cls, core_forms: Iterable[str]) -> Set[str]:
        """Expand core forms with optional basis prefix and axis letter.

        Args:
            core_forms: Core forms such as '2a' or 'is'

        Returns:
            Set of accepted normalized forms ('2a', 'n2a', 'cn2a', 'p2a', ...)
        """
        axis = cls.AXIS.casefold()
        forms = set()
        for core in core_forms:
            core = normalize_token(core)
            for prefix in BASIS_PREFIXES:
                forms.add(f"{prefix}{core}")
                forms.add(f"{prefix}{axis}{core}")
        return forms

    def _build_lookup(self) -> Dict[str, str]:
        lookup: Dict[str, str] = {}
        for code, core_forms in self.FORMAT_MAP.items():
            for form in self.expand_forms(core_forms):
                self._register(lookup, form, code)
        for code, synonyms in self.SYNONYMS.items():
            for synonym in synonyms:
                self._register(lookup, normalize_token(synonym), code)
        return lookup

    def _register(self, lookup: Dict[str, str], form: str, code: str):
        existing = lookup.get(form)
        if existing is not None and existing != code:
            raise ValueError(
                f"{self.AXIS} token '{form}' maps to both {existing} and {code}"
            )
        lookup[form] = code

    def parse(self, value: Any) -> Optional[str]:
        """Return the canonical code for a raw token, or None.

        Args:
            value: Raw cell value

        Returns:
            Canonical code (e.g. 'N2a'), or None when blank or unrecognized
        """
        token = normalize_token(value)
        if not token:
            return None
        code = self._lookup.get(token)
        if code is None:
            logger.debug(f"Unrecognized {self.AXIS} token: {value!r}")
        return code

    def is_blank(self, value: Any) -> bool:
        """Check whether a raw value carries no token at all."""
        return not normalize_token(value)
