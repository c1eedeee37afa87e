"""Where: src/cuescan/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple type checks for speed.
"""

from __future__ import annotations

import codecs

from cuescan.config.config import SIDECAR_ENCODINGS_DEFAULT, config as app_config
from cuescan.platform.logging import logger

# Sidecar lookup ---------------------------------------------------------------

# Whether to look for <name>.cue / <name>.<ext>.cue next to scanned media.
SCAN_SIDECAR: bool = bool(getattr(app_config, "scan_sidecar", True))

# Whether chardet is consulted once the configured encodings are exhausted.
DETECT_ENCODING: bool = bool(getattr(app_config, "detect_encoding", True))


def _valid_encodings(candidates: object) -> tuple[str, ...]:
    if not isinstance(candidates, (list, tuple)):
        return SIDECAR_ENCODINGS_DEFAULT
    valid: list[str] = []
    for name in candidates:
        if not isinstance(name, str):
            continue
        try:
            _ = codecs.lookup(name)
        except LookupError:
            logger.warning("Ignoring unknown sidecar encoding: %s", name)
            continue
        valid.append(name)
    return tuple(valid) or SIDECAR_ENCODINGS_DEFAULT


# Encodings tried, in order, before charset detection.
SIDECAR_ENCODINGS: tuple[str, ...] = _valid_encodings(getattr(app_config, "sidecar_encodings", None))


__all__ = [
    "SCAN_SIDECAR",
    "DETECT_ENCODING",
    "SIDECAR_ENCODINGS",
]
