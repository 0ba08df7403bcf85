"""Immutable parse options."""

from dataclasses import dataclass

# Each nesting level costs two Python frames (value dispatch plus the
# container routine); 400 levels leave headroom under the default recursion
# limit of 1000 for the caller's own stack.
DEFAULT_MAX_DEPTH = 400


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    The defaults give the permissive grammar: no ``\\uXXXX`` escapes and
    last-write-wins for duplicate object keys.
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH
    unicode_escapes: bool = False
    reject_duplicate_keys: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(
                self.max_depth, int
            ):
                raise TypeError("max_depth must be an integer or None")
            if self.max_depth < 1:
                raise ValueError("max_depth must be at least 1")
        if not isinstance(self.unicode_escapes, bool):
            raise TypeError("unicode_escapes must be a boolean")
        if not isinstance(self.reject_duplicate_keys, bool):
            raise TypeError("reject_duplicate_keys must be a boolean")
