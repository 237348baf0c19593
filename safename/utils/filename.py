from typing import Any, Optional, Tuple

from safename.core.sanitizer import CHARACTER_FILTER, UNICODE_WHITESPACE, Options, Sanitizer
from safename.models.options import DEFAULT_LENGTH, SanitizeOptions


def safe_filename(
    stem: Any,
    extension: Optional[str] = None,
    options: Options = None,
    **overrides: Any
) -> str:
    """Sanitize a stem and append an extension, keeping the whole name within length"""
    options, suffix = reserve_extension(SanitizeOptions.coerce(options, **overrides), extension)
    return Sanitizer(stem, options).truncate() + suffix


def reserve_extension(options: SanitizeOptions, extension: Optional[str]) -> Tuple[SanitizeOptions, str]:
    """
    Clean `extension` and raise the padding by its length.
    Returns the adjusted options and the suffix to append ("" when there is none).

    Raises ValueError when the extension leaves no room for at least one
    character of the stem.
    """
    suffix = clean_extension(extension, options.replace)
    if not suffix:
        return options, ""

    if options.max_length < 1:
        # Same fallback the sanitizer applies to an unusable length
        options = options.merged({"length": DEFAULT_LENGTH, "padding": 0})
    if len(suffix) >= options.max_length:
        raise ValueError(
            f"Extension {suffix!r} leaves no room for a name within "
            f"length {options.length} and padding {options.padding}"
        )
    return options.merged({"padding": options.padding + len(suffix)}), suffix


def clean_extension(extension: Optional[str], replace: str = "") -> str:
    """Extension with illegal characters and whitespace removed, dot-prefixed"""
    if not extension:
        return ""
    ext = UNICODE_WHITESPACE.sub("", extension)
    ext = CHARACTER_FILTER.sub(lambda _: replace, ext).lstrip(".")
    return f".{ext}" if ext else ""
