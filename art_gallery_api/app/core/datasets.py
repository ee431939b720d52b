"""
Loading of the three static datasets.

The artists, galleries and paintings are shipped as flat JSON files
and read exactly once when the application starts.  Records are kept
as the plain dictionaries produced by ``json.load`` so that responses
echo them back unchanged, including fields this service never looks
at.  The only shape check is that each file holds a JSON array.

A missing or malformed file raises ``DatasetLoadError``; the dataset is
a deployment artifact, so the application refuses to start rather
than serve partial data.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple

Record = Dict[str, Any]

logger = logging.getLogger(__name__)


class DatasetLoadError(RuntimeError):
    """Raised when a dataset file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load dataset {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class Datasets:
    """Immutable container for the loaded records.

    Each attribute is a tuple of records in file order.  Instances are
    owned by the application (``app.state.datasets``) and handed to the
    routes through a dependency.
    """

    artists: Tuple[Record, ...] = ()
    galleries: Tuple[Record, ...] = ()
    paintings: Tuple[Record, ...] = ()

    @classmethod
    def from_records(
        cls,
        artists: Iterable[Record] = (),
        galleries: Iterable[Record] = (),
        paintings: Iterable[Record] = (),
    ) -> "Datasets":
        """Build a container from any iterables of records."""
        return cls(tuple(artists), tuple(galleries), tuple(paintings))

    def counts(self) -> Dict[str, int]:
        return {
            "artists": len(self.artists),
            "galleries": len(self.galleries),
            "paintings": len(self.paintings),
        }


def read_dataset(path: Path) -> Tuple[Record, ...]:
    """Read a single JSON array file and return its records as a tuple."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise DatasetLoadError(path, "file not found") from None
    except json.JSONDecodeError as exc:
        raise DatasetLoadError(path, f"malformed JSON ({exc})") from exc
    except OSError as exc:
        raise DatasetLoadError(path, str(exc)) from exc

    if not isinstance(data, list):
        raise DatasetLoadError(path, f"expected a JSON array, got {type(data).__name__}")
    return tuple(data)


def load_datasets(
    data_dir: str | Path,
    artists_file: str = "artists.json",
    galleries_file: str = "galleries.json",
    paintings_file: str = "paintings-nested.json",
) -> Datasets:
    """Read all three dataset files from ``data_dir``.

    Raises
    ------
    DatasetLoadError
        If any file is missing, unreadable or does not contain a JSON
        array.
    """
    base = Path(data_dir)
    datasets = Datasets(
        artists=read_dataset(base / artists_file),
        galleries=read_dataset(base / galleries_file),
        paintings=read_dataset(base / paintings_file),
    )
    counts = datasets.counts()
    logger.info(
        "Loaded %d artists, %d galleries and %d paintings from %s",
        counts["artists"],
        counts["galleries"],
        counts["paintings"],
        base,
    )
    return datasets
