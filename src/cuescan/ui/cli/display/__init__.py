"""Display management for CLI interface."""

from cuescan.ui.cli.display.track_listing import TrackListingDisplay

__all__ = ["TrackListingDisplay"]
