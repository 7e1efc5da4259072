"""Domain models – one request's worth of words, fetches, videos and outcomes."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

UNKNOWN_SOURCE = "Unknown Source"

# A normalized lookup key: lower-cased, trimmed, non-empty.
Word = str


@dataclass(frozen=True)
class FetchSuccess:
    """Raw markup retrieved for one word."""
    word: Word
    url: str
    markup: str
    status: int = 200

    ok = True


@dataclass(frozen=True)
class FetchFailure:
    """
    Transport failure for one word: a non-2xx status or a network error.
    markup holds the error page body when the server sent one; it is diagnostic only.
    """
    word: Word
    url: str
    status: Optional[int] = None
    cause: Optional[str] = None
    markup: str = ""

    ok = False

    @property
    def reason(self) -> str:
        if self.status is not None:
            return f"HTTP {self.status}"
        return self.cause or "unknown error"


FetchResult = Union[FetchSuccess, FetchFailure]


@dataclass(frozen=True)
class VideoRef:
    """The demonstration clip chosen for one word."""
    word: Word
    video_url: str
    poster_url: str = ""
    source: str = UNKNOWN_SOURCE

    def __post_init__(self):
        if not self.video_url or not self.video_url.strip():
            raise ValueError(f"VideoRef for {self.word!r} needs a non-empty video_url")

    def to_dict(self) -> Dict[str, str]:
        return {
            "word": self.word,
            "videoUrl": self.video_url,
            "posterUrl": self.poster_url,
            "source": self.source,
        }


@dataclass(frozen=True)
class WordOutcome:
    """One word and at most one video for it."""
    word: Word
    video: Optional[VideoRef] = None

    @property
    def resolved(self) -> bool:
        return self.video is not None


@dataclass
class ResolutionReport:
    """Ordered, partial-failure-tolerant result for a phrase."""
    outcomes: List[WordOutcome]

    @property
    def videos(self) -> List[VideoRef]:
        """Resolved videos, in word order."""
        return [o.video for o in self.outcomes if o.video is not None]

    @property
    def words_requested(self) -> int:
        return len(self.outcomes)

    @property
    def words_resolved(self) -> int:
        return len(self.videos)

    def to_dict(self) -> Dict[str, Any]:
        """Response payload: per-word groups (one video each), the flat video list, and counts."""
        return {
            "results": [{"word": v.word, "videos": [v.to_dict()]} for v in self.videos],
            "videos": [v.to_dict() for v in self.videos],
            "totalWords": self.words_requested,
            "wordsResolved": self.words_resolved,
        }
