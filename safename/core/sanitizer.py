import logging
import re
from typing import Any, Mapping, Union

from safename.models.options import DEFAULT_LENGTH, SanitizeOptions

logger = logging.getLogger(__name__)

# Unicode White_Space property. U+001C..U+001F are left to the control filter.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
UNICODE_WHITESPACE = re.compile(f"[{re.escape(WHITESPACE)}]+")

# Cc category plus characters rejected by at least one major OS or shell
CHARACTER_FILTER = re.compile(r"[\x00-\x1f\x7f-\x9f\[\]{}|/\\`!@$*()<>?'\";:]")

LEADING_DASHES = re.compile(f"(?:-[{re.escape(WHITESPACE)}]?)+")

WINDOWS_RESERVED_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

FALLBACK_FILENAME = "file"

Options = Union[SanitizeOptions, Mapping[str, Any], None]


class Sanitizer:
    """
    Turn an arbitrary string into a name usable as a file on Windows,
    macOS and Linux.

    Every stage is public so callers can inspect partial results.
    The final name is `filename` (same as `truncate()` and `str()`).
    """

    def __init__(self, filename: Any, options: Options = None, **overrides: Any):
        self.raw = "" if filename is None else str(filename)
        self.options = SanitizeOptions.coerce(options, **overrides)

    def __repr__(self) -> str:
        return f"Sanitizer({self.raw!r}, {self.options!r})"

    def __str__(self) -> str:
        return self.truncate()

    @property
    def filename(self) -> str:
        return self.truncate()

    def normalize(self) -> str:
        """Strip surrounding whitespace and collapse inner runs"""
        whitespace = self.options.whitespace
        return UNICODE_WHITESPACE.sub(lambda _: whitespace, self.raw.strip(WHITESPACE))

    def sanitize(self) -> str:
        """Normalized name with every filter applied, not yet truncated"""
        name = self.filter_characters(self.normalize())
        name = self.filter_reserved_names(name)
        name = self.filter_blank(name)
        return self.filter_leading_dashes(name)

    def truncate(self) -> str:
        """
        Cut the sanitized name to `length - padding` code points.

        A configuration that leaves no room at all is not honoured;
        the default length is used instead so the result is never blank.
        """
        max_length = self.options.max_length
        if max_length < 1:
            logger.warning(
                f"Unusable length {self.options.length} with padding "
                f"{self.options.padding}, truncating to {DEFAULT_LENGTH}"
            )
            max_length = DEFAULT_LENGTH
        return self.sanitize()[:max_length]

    def filter_characters(self, name: str) -> str:
        replacement = self.options.replace
        return CHARACTER_FILTER.sub(lambda _: replacement, name)

    @staticmethod
    def filter_reserved_names(name: str) -> str:
        if name.upper() in WINDOWS_RESERVED_NAMES:
            logger.debug(f"Reserved name {name!r} replaced with {FALLBACK_FILENAME!r}")
            return FALLBACK_FILENAME
        return name

    @staticmethod
    def filter_blank(name: str) -> str:
        if not name:
            logger.debug(f"Blank name replaced with {FALLBACK_FILENAME!r}")
            return FALLBACK_FILENAME
        return name

    @staticmethod
    def filter_leading_dashes(name: str) -> str:
        # Runs after the blank check, so "---" comes out empty
        match = LEADING_DASHES.match(name)
        return name[match.end():] if match else name


def sanitize(filename: Any, options: Options = None, **overrides: Any) -> str:
    """Sanitize and truncate `filename` in one call"""
    return Sanitizer(filename, options, **overrides).truncate()
