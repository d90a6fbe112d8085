"""
Country name normalization.

Maps raw labels from the geography source onto the canonical names used
as heatmap keys and tooltip text. Rules are applied in order, each one
replacing the first occurrence of its pattern anywhere in the label, so
a rule also fires inside a longer name (e.g. "Hong Kong SAR" becomes
"Hong Kong SAR SAR"). Labels that match nothing pass through unchanged.
"""

# Ordered (pattern, replacement) pairs. Order matters: the three Korea
# variants must run before anything that could touch "Korea".
NAME_REPLACEMENTS = [
    ("United States of America", "United States"),
    ("Russian Federation", "Russia"),
    ("Czechia", "Czech Republic"),
    ("Korea, Republic of", "South Korea"),
    ("Korea (Republic of)", "South Korea"),
    ("Korea, South", "South Korea"),
    ("Taiwan, Province of China", "Taiwan"),
    ("Hong Kong", "Hong Kong SAR"),
    ("Macao", "Macao SAR, China"),
    ("Bahamas", "The Bahamas"),
    ("Cayman Islands", "The Cayman Islands"),
]


def normalize_name(raw, rules=None) -> str:
    """Return the canonical country name for a raw geography label."""
    if raw is None:
        return ""
    name = str(raw)
    for pattern, replacement in (NAME_REPLACEMENTS if rules is None else rules):
        name = name.replace(pattern, replacement, 1)
    return name
