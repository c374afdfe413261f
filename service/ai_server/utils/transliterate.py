"""
Cyrillic to Latin transliteration.

Used for names sent to services that only accept ASCII (e.g. 100ms rooms).
"""

CYRILLIC_TO_LATIN = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "e",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
}


def transliterate(text: str) -> str:
    """
    Transliterate Cyrillic characters, keeping everything else as-is.

    Case is preserved: "Привет" -> "Privet", "ЖУК" -> "ZhUK".

    Examples:
        >>> transliterate("Привет, мир!")
        'Privet, mir!'
    """
    if not text:
        return ""

    result = []
    for char in text:
        lower = char.lower()
        if lower not in CYRILLIC_TO_LATIN:
            result.append(char)
            continue

        latin = CYRILLIC_TO_LATIN[lower]
        if char != lower and latin:
            latin = latin[0].upper() + latin[1:]
        result.append(latin)

    return "".join(result)
