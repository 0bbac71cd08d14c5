"""
Name Normalizer

Reduces an arbitrary Unicode personal name to the uppercase Latin letters
A-Z so it can be encoded as amino acids.

Steps, in order:
1. Transliterate Cyrillic and Greek characters through fixed tables
   (case-sensitive, multi-letter expansions such as Ж -> "ZH")
2. NFD-decompose and drop combining marks (José -> Jose)
3. Uppercase
4. Drop everything outside A-Z

Mixed-script names are handled per character, not per detected language.
"""

import logging
import re
import unicodedata
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Russian, Ukrainian, Belarusian, Serbian and Macedonian letters
CYRILLIC_TO_LATIN = MappingProxyType({
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Е": "E", "Ё": "YO",
    "Ж": "ZH", "З": "Z", "И": "I", "Й": "Y", "К": "K", "Л": "L", "М": "M",
    "Н": "N", "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U",
    "Ф": "F", "Х": "KH", "Ц": "TS", "Ч": "CH", "Ш": "SH", "Щ": "SHCH",
    "Ъ": "", "Ы": "Y", "Ь": "", "Э": "E", "Ю": "YU", "Я": "YA",
    "Є": "YE", "І": "I", "Ї": "YI", "Ґ": "G", "Ў": "U",
    "Ђ": "DJ", "Ј": "J", "Љ": "LJ", "Њ": "NJ", "Ћ": "C", "Џ": "DZ",
    "Ѓ": "GJ", "Ќ": "KJ", "Ѕ": "DZ",
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
    "є": "ye", "і": "i", "ї": "yi", "ґ": "g", "ў": "u",
    "ђ": "dj", "ј": "j", "љ": "lj", "њ": "nj", "ћ": "c", "џ": "dz",
    "ѓ": "gj", "ќ": "kj", "ѕ": "dz",
})

# Modern Greek, including the tonos/dialytika vowels
GREEK_TO_LATIN = MappingProxyType({
    "Α": "A", "Β": "V", "Γ": "G", "Δ": "D", "Ε": "E", "Ζ": "Z", "Η": "I",
    "Θ": "TH", "Ι": "I", "Κ": "K", "Λ": "L", "Μ": "M", "Ν": "N", "Ξ": "X",
    "Ο": "O", "Π": "P", "Ρ": "R", "Σ": "S", "Τ": "T", "Υ": "Y", "Φ": "F",
    "Χ": "CH", "Ψ": "PS", "Ω": "O",
    "Ά": "A", "Έ": "E", "Ή": "I", "Ί": "I", "Ό": "O", "Ύ": "Y", "Ώ": "O",
    "Ϊ": "I", "Ϋ": "Y",
    "α": "a", "β": "v", "γ": "g", "δ": "d", "ε": "e", "ζ": "z", "η": "i",
    "θ": "th", "ι": "i", "κ": "k", "λ": "l", "μ": "m", "ν": "n", "ξ": "x",
    "ο": "o", "π": "p", "ρ": "r", "σ": "s", "ς": "s", "τ": "t", "υ": "y",
    "φ": "f", "χ": "ch", "ψ": "ps", "ω": "o",
    "ά": "a", "έ": "e", "ή": "i", "ί": "i", "ό": "o", "ύ": "y", "ώ": "o",
    "ϊ": "i", "ϋ": "y", "ΐ": "i", "ΰ": "y",
})

_NON_LATIN_LETTER = re.compile(r"[^A-Z]")


def transliterate(text: str) -> str:
    """Replace Cyrillic and Greek characters with Latin approximations."""
    parts = []
    for char in text:
        if char in CYRILLIC_TO_LATIN:
            parts.append(CYRILLIC_TO_LATIN[char])
        elif char in GREEK_TO_LATIN:
            parts.append(GREEK_TO_LATIN[char])
        else:
            parts.append(char)
    return "".join(parts)


def strip_diacritics(text: str) -> str:
    """Decompose to NFD and remove combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if unicodedata.category(c) != "Mn")


def normalize_name(name: str) -> str:
    """
    Normalize a personal name to uppercase A-Z.

    Args:
        name: Any Unicode string

    Returns:
        String over [A-Z]; empty if nothing usable remains
    """
    if not name:
        return ""

    normalized = _NON_LATIN_LETTER.sub("", strip_diacritics(transliterate(name)).upper())
    if not normalized:
        logger.debug(f"Name {name!r} has no encodable letters")
    return normalized
