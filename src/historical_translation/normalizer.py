"""
Cleanup of OCR output from early-modern typesetting.
"""

import re

_LONG_S = "ſ"
_LIGATURES = {
    "ﬀ": "ff",
    "ﬁ": "fi",
    "ﬂ": "fl",
}

_WHITESPACE_RUN = re.compile(r"\s+")
# Long s and ligatures count as lowercase so a second pass splits nothing new
_MERGED_WORDS = re.compile(r"([a-z" + _LONG_S + "".join(_LIGATURES) + r"])([A-Z])")
_GLYPHS = str.maketrans({_LONG_S: "s", **_LIGATURES})


def normalize_historical_text(text: str) -> str:
    """Normalize raw OCR text of a historical facsimile.

    Collapses whitespace, splits words OCR merged together ("wordNext"
    becomes "word Next"), replaces the long s, expands ff/fi/fl ligatures
    and trims the result. The merged-word split also breaks up genuine
    camel-case tokens.

    Example:
        >>> normalize_historical_text("the  ſun roſe")
        'the sun rose'
    """
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _MERGED_WORDS.sub(r"\1 \2", text)
    text = text.translate(_GLYPHS)
    return text.strip()
