# Where: cuescan.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Parsers, adapters and the CLI all speak in TrackRecord.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .track_record import TrackRecord

__all__ = ["TrackRecord"]
