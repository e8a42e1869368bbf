"""Search term expansion for table lookups."""


def build_search_terms(raw: str, normalized: str | None) -> list[str]:
    """
    Build the ordered, de-duplicated values to match against stored names.

    Stored domain names may be in any case or not normalized at all, so the
    trimmed input is tried as-is, lowercased and uppercased before the
    normalized form.
    """
    trimmed = raw.strip()
    terms = [trimmed, trimmed.lower(), trimmed.upper()]
    if normalized and normalized != raw:
        terms.append(normalized)
    return list(dict.fromkeys(terms))
