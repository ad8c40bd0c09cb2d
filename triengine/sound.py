"""WAV sound effects."""

from __future__ import annotations

import wave

from .utils import PathType


class Sound:
    """A WAV file loaded into memory that can be played on demand."""

    def __init__(self, file: PathType) -> None:
        self.path = file
        with wave.open(str(file), "rb") as wav:
            self.channels = wav.getnchannels()
            self.sample_width = wav.getsampwidth()
            self.sample_rate = wav.getframerate()
            self.frames = wav.readframes(wav.getnframes())

    @property
    def duration(self) -> float:
        frame_size = self.channels * self.sample_width
        return len(self.frames) / frame_size / self.sample_rate

    def play(self):
        """Start playback and return the player."""
        import pyglet

        source = pyglet.media.load(str(self.path), streaming=False)
        return source.play()