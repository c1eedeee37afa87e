# Where: cuescan.shared.track_record
# What: Canonical TrackRecord dataclass shared by the album aggregate and each track.
# Why: One record shape lets the key resolver target album and track scope alike.

from dataclasses import dataclass, fields


@dataclass
class TrackRecord:
    """Metadata and timing for an album or a single cuesheet track.

    String fields use ``None`` and integer fields use ``0`` as the unset
    sentinel. Descriptive fields are write-once; see ``assign_once``.
    """

    track_number: int = 0
    subtrack: bool = False

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    album_artist: str | None = None
    composer: str | None = None
    genre: str | None = None
    comment: str | None = None
    grouping: str | None = None
    orchestra: str | None = None
    conductor: str | None = None
    date_released: str | None = None
    title_sort: str | None = None
    artist_sort: str | None = None
    album_sort: str | None = None
    album_artist_sort: str | None = None
    composer_sort: str | None = None
    isrc: str | None = None
    replaygain_track_gain: str | None = None
    replaygain_album_gain: str | None = None

    year: int = 0
    total_tracks: int = 0
    disc: int = 0
    total_discs: int = 0

    samplerate: int = 0
    sample_offset: int = 0
    sample_count: int = 0
    song_length: int = 0

    disabled: bool = False

    def is_unset(self, name: str) -> bool:
        """Return whether ``name`` still holds its zero/empty sentinel."""
        return not getattr(self, name)

    def assign_once(self, name: str, value: str | int | None) -> bool:
        """Set ``name`` to ``value`` only if the field is still unset.

        Returns:
            bool: ``True`` when the value was stored.
        """
        if value is None or not self.is_unset(name):
            return False
        setattr(self, name, value)
        return True

    def as_dict(self, *, skip_unset: bool = False) -> dict[str, str | int | bool | None]:
        """Return a plain mapping of the record's fields."""
        result: dict[str, str | int | bool | None] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if skip_unset and not value:
                continue
            result[f.name] = value
        return result


__all__ = ["TrackRecord"]
