"""Config settings – Settings base class.

Every field of a settings dataclass maps to one environment variable named
``<PREFIX>_<FIELD>`` in upper case, e.g. ``CITYDIR_PAGE_SIZE``.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for directory settings read from the environment.

    Subclasses declare their fields with defaults and may override
    :meth:`_validate`; it runs on construction, so an instance is always valid
    whichever loader built it.
    """

    _prefix: ClassVar[str] = "CITYDIR"

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` on out-of-range values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in dataclasses.fields(cls))  # type: ignore[arg-type]


__all__ = ["Settings"]
