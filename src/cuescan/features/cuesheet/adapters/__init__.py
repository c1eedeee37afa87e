"""
Summary: Adapter exports for the cuesheet feature.
Why: Provide ready-to-use bridges for container and sidecar ports.
"""

from .mutagen_adapter import MutagenContainerReader
from .sidecar import SidecarReader

__all__ = ["MutagenContainerReader", "SidecarReader"]
