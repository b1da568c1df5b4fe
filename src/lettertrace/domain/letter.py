"""Tracing letter representation.

A tracing letter is an ordered sequence of stroke zones plus the cues a
host screen shows or speaks around a tracing session.
"""

from dataclasses import dataclass
from typing import Any

from lettertrace.domain.zone import StrokeZone


@dataclass(frozen=True)
class TracingLetter:
    """A letter the user traces stroke by stroke.

    Strokes are traced strictly in order: stroke i+1 cannot accumulate
    coverage before stroke i reaches its threshold.

    Attributes:
        char: Display glyph (e.g., "A")
        strokes: Ordered strokes making up the letter
        sound: Phonetic cue (e.g., "ahh")
        word: Exemplar word (e.g., "Apple")
        emoji: Reward glyph shown on completion
    """

    char: str
    strokes: tuple[StrokeZone, ...]
    sound: str
    word: str
    emoji: str

    @property
    def stroke_count(self) -> int:
        """Number of strokes in the letter."""
        return len(self.strokes)

    @property
    def prompt(self) -> str:
        """Instruction shown when the session starts."""
        return f"Trace the letter {self.char}!"

    @property
    def praise(self) -> str:
        """Message shown when the letter is complete."""
        return f"{self.char} is for {self.word}! Great job!"

    @property
    def cue(self) -> str:
        """Replayable sound cue: glyph, sound, then word."""
        return f"{self.char}. {self.sound}. {self.word}."

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, preserving stroke order.

        Returns:
            Dictionary representation of the letter
        """
        return {
            "char": self.char,
            "sound": self.sound,
            "word": self.word,
            "emoji": self.emoji,
            "strokes": [s.to_dict() for s in self.strokes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TracingLetter":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a letter

        Returns:
            TracingLetter instance
        """
        return cls(
            char=data["char"],
            strokes=tuple(StrokeZone.from_dict(s) for s in data["strokes"]),
            sound=data.get("sound", ""),
            word=data.get("word", ""),
            emoji=data.get("emoji", ""),
        )
