"""File output helpers that sit outside the sampling path."""

from .wav_export import DEFAULT_WAV_PATH, synthesize_sine, write_sine_wav

__all__ = ["DEFAULT_WAV_PATH", "synthesize_sine", "write_sine_wav"]
