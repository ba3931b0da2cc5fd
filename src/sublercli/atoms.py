"""Metadata atoms: the tag/value pairs SublerCLI writes to a media file."""

import dataclasses
import enum
from collections.abc import Iterator
from typing import Self

from .consts import METADATA_FLAG
from .utils import assert_exhaustiveness

MEDIA_KIND_TAG = "Media Kind"

# Identifier to SublerCLI tag name. Identifiers double as CLI option names.
METADATA_TAGS: dict[str, str] = {
    "artist": "Artist",
    "album_artist": "Album Artist",
    "album": "Album",
    "grouping": "Grouping",
    "composer": "Composer",
    "comments": "Comments",
    "genre": "Genre",
    "release_date": "Release Date",
    "track_number": "Track #",
    "disk_number": "Disk #",
    "tempo": "Tempo",
    "tv_show": "TV Show",
    "tv_episode_number": "TV Episode #",
    "tv_network": "TV Network",
    "tv_episode_id": "TV Episode ID",
    "tv_season": "TV Season",
    "description": "Description",
    "long_description": "Long Description",
    "series_description": "Series Description",
    "hd_video": "HD Video",
    "rating_annotation": "Rating Annotation",
    "studio": "Studio",
    "cast": "Cast",
    "director": "Director",
    "gapless": "Gapless",
    "codirector": "Codirector",
    "producers": "Producers",
    "screenwriters": "Screenwriters",
    "lyrics": "Lyrics",
    "copyright": "Copyright",
    "encoding_tool": "Encoding Tool",
    "encoded_by": "Encoded By",
    "keywords": "Keywords",
    "category": "Category",
    "contentid": "contentID",
    "artistid": "artistID",
    "playlistid": "playlistID",
    "genreid": "genreID",
    "composerid": "composerID",
    "xid": "XID",
    "itunes_account": "iTunes Account",
    "itunes_account_type": "iTunes Account Type",
    "itunes_country": "iTunes Country",
    "track_sub_title": "Track Sub-Title",
    "song_description": "Song Description",
    "art_director": "Art Director",
    "arranger": "Arranger",
    "lyricist": "Lyricist",
    "acknowledgement": "Acknowledgement",
    "conductor": "Conductor",
    "linear_notes": "Linear Notes",
    "record_company": "Record Company",
    "original_artist": "Original Artist",
    "phonogram_rights": "Phonogram Rights",
    "producer": "Producer",
    "performer": "Performer",
    "publisher": "Publisher",
    "sound_engineer": "Sound Engineer",
    "soloist": "Soloist",
    "credits": "Credits",
    "thanks": "Thanks",
    "online_extras": "Online Extras",
    "executive_producer": "Executive Producer",
    "sort_name": "Sort Name",
    "sort_artist": "Sort Artist",
    "sort_album_artist": "Sort Album Artist",
    "sort_album": "Sort Album",
    "sort_composer": "Sort Composer",
    "sort_tv_show": "Sort TV Show",
    "artwork": "Artwork",
    "name": "Name",
    "title": "Name",
    "rating": "Rating",
    "media_kind": MEDIA_KIND_TAG,
}


@dataclasses.dataclass(frozen=True)
class Atom:
    """A single metadata atom, e.g. the "Artist" of a song."""

    tag: str
    value: str

    def __post_init__(self) -> None:
        """Reject text SublerCLI would misread.

        Atoms are not escaped. Braces delimit each atom and the first colon
        splits tag from value, so neither may leak into the wrong place.
        """
        if any(c in self.tag for c in "{}:"):
            raise ValueError(f"Invalid atom tag: {self.tag!r}")
        if any(c in self.value for c in "{}"):
            raise ValueError(f"Invalid value for atom {self.tag!r}: {self.value!r}")

    def arg(self) -> str:
        """Format as SublerCLI expects, `{tag:value}`."""
        return f"{{{self.tag}:{self.value}}}"


@dataclasses.dataclass(frozen=True)
class Atoms:
    """An ordered collection of atoms to write to a file.

    Adding returns a new collection, so calls chain:

        Atoms().add("Cast", "John Doe").set("genre", "Foo,Bar").set("title", "Foo")

    Duplicate tags are kept, in order.
    """

    atoms: tuple[Atom, ...] = ()

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.atoms)

    def __len__(self) -> int:
        return len(self.atoms)

    def add_atom(self, atom: Atom) -> Self:
        """Append the given atom."""
        return dataclasses.replace(self, atoms=(*self.atoms, atom))

    def add(self, tag: str, value: str) -> Self:
        """Append an atom with an arbitrary tag name."""
        return self.add_atom(Atom(tag, value))

    def set(self, key: str, value: str) -> Self:
        """Append an atom for one of the known tags.

        `key` is either an identifier in `METADATA_TAGS`, like "release_date",
        or a tag name, like "Release Date".
        """
        return self.add(lookup_tag(key), value)

    def args(self) -> list[str]:
        """SublerCLI arguments setting these atoms. Empty if there are none."""
        if not self.atoms:
            return []
        return [METADATA_FLAG, "".join(atom.arg() for atom in self.atoms)]

    @staticmethod
    def metadata_tags() -> list[str]:
        """All known tag names."""
        return list(dict.fromkeys(METADATA_TAGS.values()))


def lookup_tag(key: str) -> str:
    """Tag name for the given identifier or tag name. Raises KeyError if unknown."""
    if key in METADATA_TAGS:
        return METADATA_TAGS[key]
    if key in METADATA_TAGS.values():
        return key
    raise KeyError(f"Unknown metadata tag: {key!r}")


class MediaKind(enum.Enum):
    """The type of media of an input file."""

    MOVIE = enum.auto()
    MUSIC = enum.auto()
    AUDIOBOOK = enum.auto()
    MUSIC_VIDEO = enum.auto()
    TV_SHOW = enum.auto()
    BOOKLET = enum.auto()
    RIGHTONE = enum.auto()

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        """Name SublerCLI uses for this kind."""
        if self is MediaKind.MOVIE:
            return "Movie"
        elif self is MediaKind.MUSIC:
            return "Music"
        elif self is MediaKind.AUDIOBOOK:
            return "Audiobook"
        elif self is MediaKind.MUSIC_VIDEO:
            return "Music Video"
        elif self is MediaKind.TV_SHOW:
            return "TV Show"
        elif self is MediaKind.BOOKLET:
            return "Booklet"
        elif self is MediaKind.RIGHTONE:
            return "Rightone"
        else:  # pragma: no cover
            assert_exhaustiveness(self)

    def as_atom(self) -> Atom:
        """The "Media Kind" atom for this kind."""
        return Atom(MEDIA_KIND_TAG, self.display_name)

    @classmethod
    def parse(cls, value: str) -> "MediaKind":
        """Parse a display name ("TV Show") or member name ("tv_show"), case-insensitively."""
        needle = value.strip().casefold()
        for kind in cls:
            if needle in (kind.display_name.casefold(), kind.name.casefold()):
                return kind
        raise ValueError(f"Unknown media kind: {value!r}")
