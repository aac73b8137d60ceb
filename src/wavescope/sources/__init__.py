"""Signal sources that can feed the sampler.

Any object with a ``sample_all()`` method returning one number per tracked
source works; :class:`SineSignalSource` is the built-in synthetic generator.
"""

from .base import CallableSource, SignalSource
from .sine import SineSignalSource

__all__ = ["SignalSource", "CallableSource", "SineSignalSource"]
