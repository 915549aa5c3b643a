"""Form submissions — the multi-value data source.

``FormData`` mirrors what a browser hands over on submit: an ordered list
of ``(name, value)`` entries where a name may repeat (checkboxes,
multi-selects) and a value may be an uploaded file. It implements
``Mapping[str, str]`` plus ``get_list`` and so satisfies the
``MultiValueMapping`` protocol the resolver looks for.

Building one is the caller's business (a framework's parsed request, a
test fixture)::

    form = FormData.from_pairs([
        ("username", "bob"),
        ("tags", "a"),
        ("tags", "b"),
        ("avatar", UploadFile("me.png", b"...", "image/png")),
    ])
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UploadFile:
    """A file entry in a form submission.

    Only what checks need: the name the browser reported, the bytes and
    their type. ``size`` is derived, so an empty file input (which
    browsers still submit) has size 0.
    """

    filename: str
    content: bytes = b""
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return f"UploadFile({self.filename!r}, {self.content_type!r}, {self.size} bytes)"


class FormData(Mapping[str, str]):
    """Immutable form submission.

    ``__getitem__`` and ``get`` return the first text value for a name, the
    way a browser ``FormData.get`` does. ``get_list`` returns every text
    value. Files are kept apart in ``files`` (first file per name) and
    ``get_files`` (all of them).
    """

    __slots__ = ("_data", "_files")

    def __init__(
        self,
        data: Mapping[str, Iterable[str]] | None = None,
        files: Mapping[str, UploadFile | Iterable[UploadFile]] | None = None,
    ) -> None:
        # Copied so later changes to the caller's dicts don't leak in
        self._data: dict[str, tuple[str, ...]] = {
            name: tuple(values) for name, values in (data or {}).items()
        }
        self._files: dict[str, tuple[UploadFile, ...]] = {
            name: (value,) if isinstance(value, UploadFile) else tuple(value)
            for name, value in (files or {}).items()
        }

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str | UploadFile]]) -> FormData:
        """Build from ordered ``(name, value)`` entries.

        Text and file entries are split by type; order within each name is
        kept.
        """
        data: dict[str, list[str]] = {}
        files: dict[str, list[UploadFile]] = {}
        for name, value in pairs:
            if isinstance(value, UploadFile):
                files.setdefault(name, []).append(value)
            else:
                data.setdefault(name, []).append(value)
        return cls(data, files)

    @property
    def files(self) -> Mapping[str, UploadFile]:
        """First uploaded file by field name."""
        return {name: uploads[0] for name, uploads in self._files.items() if uploads}

    def get_files(self, key: str) -> list[UploadFile]:
        """Every file uploaded under *key*."""
        return list(self._files.get(key, ()))

    def __getitem__(self, key: str) -> str:
        values = self._data.get(key)
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {list(v)!r}" for k, v in self._data.items())
        return f"FormData({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all text values for *key*."""
        return list(self._data.get(key, ()))
