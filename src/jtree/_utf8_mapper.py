"""UTF-8 position mapping from character offsets to byte offsets."""

from __future__ import annotations

from typing import Final


class UTF8PositionMapper:
    """Character to UTF-8 byte offset mapping with a checkpoint system.

    Rather than storing a byte offset for every character, the mapper
    records one checkpoint per ``checkpoint_interval`` characters and
    encodes only the stretch between the nearest checkpoint and the target.
    """

    def __init__(self, text: str, checkpoint_interval: int = 256) -> None:
        """Initialize position mapper with checkpoint system.

        Args:
            text: The text to create position mapping for
            checkpoint_interval: Characters between checkpoints (default 256)
        """
        if checkpoint_interval < 1:
            raise ValueError("checkpoint_interval must be positive")
        self.text: Final = text
        self.checkpoint_interval: Final = checkpoint_interval
        self.checkpoints: list[int] = []
        self._is_ascii_only: bool = text.isascii()

        if not self._is_ascii_only:
            self._build_checkpoints()

    def _build_checkpoints(self) -> None:
        """Build byte offsets for every checkpoint_interval-th character."""
        byte_pos = 0
        step = self.checkpoint_interval
        for start in range(0, len(self.text) + 1, step):
            self.checkpoints.append(byte_pos)
            byte_pos += _utf8_length(self.text[start : start + step])

    def char_to_byte(self, char_pos: int) -> int:
        """Convert character position to byte position.

        Args:
            char_pos: Character position in original text, clamped to the
                text length

        Returns:
            Byte position in UTF-8 encoded text
        """
        char_pos = max(0, min(char_pos, len(self.text)))
        if self._is_ascii_only:
            return char_pos

        index = char_pos // self.checkpoint_interval
        base_char = index * self.checkpoint_interval
        return self.checkpoints[index] + _utf8_length(
            self.text[base_char:char_pos]
        )


def _utf8_length(chunk: str) -> int:
    # Lone surrogates can only come from str input; count them as 3 bytes.
    return len(chunk.encode("utf-8", "surrogatepass"))
