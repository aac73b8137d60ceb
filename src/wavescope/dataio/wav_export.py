"""One-shot synthesis of a diagnostic sine tone written as 16-bit PCM WAV."""

from __future__ import annotations

import logging
import wave
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_WAV_PATH = Path("data") / "output.wav"
SAMPLE_RATE_HZ = 48_000
DURATION_S = 5.0
TONE_HZ = 440.0
PCM_MAX = np.iinfo(np.int16).max


def synthesize_sine(
    *,
    sample_rate: int = SAMPLE_RATE_HZ,
    duration_s: float = DURATION_S,
    frequency_hz: float = TONE_HZ,
) -> np.ndarray:
    """
    Return ``duration_s`` of a sine tone as int16 samples.

    The waveform is shifted into ``[0, 1]`` before scaling, so every sample is
    non-negative: ``(sin(x) + 1) / 2 * 32767``.
    """
    if sample_rate <= 0:
        raise ValueError("sample_rate must be positive")
    n_samples = int(sample_rate * duration_s)
    if n_samples < 0:
        raise ValueError("duration_s must be >= 0")
    x = np.arange(n_samples, dtype=np.float64) * 2.0 * np.pi * frequency_hz / sample_rate
    y = (np.sin(x) + 1.0) / 2.0
    return (y * PCM_MAX).astype(np.int16)


def write_sine_wav(
    path: str | Path = DEFAULT_WAV_PATH,
    *,
    sample_rate: int = SAMPLE_RATE_HZ,
    duration_s: float = DURATION_S,
    frequency_hz: float = TONE_HZ,
) -> Path:
    """Synthesize the tone and write it as a mono 16-bit WAV file at ``path``."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pcm = synthesize_sine(sample_rate=sample_rate, duration_s=duration_s, frequency_hz=frequency_hz)
    with wave.open(str(out_path), "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(int(sample_rate))
        wf.writeframes(pcm.astype("<i2").tobytes())
    logger.info("Wrote %d samples (%.1f s @ %d Hz) to %s", pcm.size, duration_s, sample_rate, out_path)
    return out_path
