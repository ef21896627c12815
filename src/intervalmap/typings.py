from typing import Any, Protocol, TypeVar

T = TypeVar("T")
KT = TypeVar("KT")
VT = TypeVar("VT")
_T_contra = TypeVar("_T_contra", contravariant=True)


class SupportsDunderLT(Protocol[_T_contra]):
    """Keys only need a strict total order expressed through ``<``."""

    def __lt__(self, other: _T_contra, /) -> bool: ...


SupportsLessThanT = TypeVar("SupportsLessThanT", bound=SupportsDunderLT[Any])
