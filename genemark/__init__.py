"""
genemark - Gene Marker encoding

Float32 markers with a fixed-width hexadecimal text encoding, and genes built
from an influence marker plus an ordered sequence of markers that can be
mutated by five structural edits.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .utils import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .evolution import *  # noqa: F401,F403
from .utils.observability import (  # noqa: F401
    assert_determinism_equivalence,
    determinism_signature,
    gene_report,
)

# Configuration presets as top-level names
from .config import (  # noqa: F401
    DEFAULT_CONFIG,
    PRESET_MINIMAL,
    PRESET_RESEARCH,
    PRESET_STANDARD,
    gene_from_config,
    merge_config,
)
