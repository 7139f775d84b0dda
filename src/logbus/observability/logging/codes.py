"""Observability – CodeResolver.

Error codes come in two flavours: numeric codes are used as-is, symbolic
codes (e.g. ``"ERR_DISK"``) are looked up in a key-value store whose value
is the numeric code.
"""
from __future__ import annotations

from logbus.kernel.errors import CodeLookupError
from logbus.kernel.messaging import CodeLookup
from logbus.kernel.types import NOTHING, Option


class CodeResolver:
    """Turn an ``int | str`` code into an ``int``.

    Parameters
    ----------
    lookup:
        The key-value store used for symbolic codes, if any.
    """

    def __init__(self, lookup: Option[CodeLookup] = NOTHING) -> None:
        self._lookup = lookup

    @property
    def lookup(self) -> Option[CodeLookup]:
        return self._lookup

    async def resolve(self, code: int | str) -> int:
        """Return the numeric value of *code*.

        Raises
        ------
        CodeLookupError
            When *code* is symbolic and no lookup is configured, the lookup
            fails, the key is missing or its value is not an integer.
        """
        if not isinstance(code, str):
            return code

        if self._lookup.is_none():
            raise CodeLookupError(code, f"No code lookup configured for '{code}'")

        try:
            raw = await self._lookup.unwrap().get(code)
        except Exception as exc:  # noqa: BLE001
            raise CodeLookupError(code, cause=exc) from exc

        if raw is None:
            raise CodeLookupError(code, f"Error code '{code}' not found")
        try:
            return int(raw)
        except (TypeError, ValueError) as exc:
            raise CodeLookupError(
                code,
                f"Error code '{code}' maps to non-integer value {raw!r}",
                cause=exc,
            ) from exc


__all__ = ["CodeResolver"]
