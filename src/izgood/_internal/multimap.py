"""MultiValueMapping protocol — the shape of a browser form submission.

A structural protocol so the resolver can recognise any multi-valued
mapping (``FormData``, a framework's query params, a werkzeug-style
``MultiDict``) without coupling to a concrete type.
"""

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only mapping where keys can have multiple values.

    ``get`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    Defined with explicit dunder methods because Protocols cannot inherit
    from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> Any: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: Any = None) -> Any: ...
    def get_list(self, key: str) -> list[Any]: ...
