import bleach


def clean_text(value) -> str:
    """Coerce a submitted value to a stripped string without markup."""
    if value is None:
        return ''
    return bleach.clean(str(value), tags=[], strip=True).strip()


def clean_optional(value):
    """Like :func:`clean_text` but maps blank input to ``None``."""
    return clean_text(value) or None
