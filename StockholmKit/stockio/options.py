from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

DEFAULT_WIDTH = 80

_FALSE_TOKENS = {"0", "false", "no", "off", ""}
_TRUE_TOKENS = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ParseOptions:
    strict: bool = False
    quiet: bool = False

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ParseOptions":
        return cls(
            strict=to_bool(payload.get("strict", False), name="strict"),
            quiet=to_bool(payload.get("quiet", False), name="quiet"),
        )

    @classmethod
    def coerce(cls, value: OptionsArg = None, **overrides: Any) -> "ParseOptions":
        return _coerce(cls, value, overrides)


@dataclass(frozen=True)
class FormatOptions:
    width: Optional[int] = DEFAULT_WIDTH
    indent_names: bool = False

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FormatOptions":
        if "indentNames" in payload:
            indent = payload["indentNames"]
        else:
            indent = payload.get("indent_names", False)
        return cls(
            width=parse_width(payload.get("width", DEFAULT_WIDTH)),
            indent_names=to_bool(indent, name="indent_names"),
        )

    @classmethod
    def coerce(cls, value: OptionsArg = None, **overrides: Any) -> "FormatOptions":
        return _coerce(cls, value, overrides)


@dataclass(frozen=True)
class FastaOptions:
    width: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FastaOptions":
        return cls(width=parse_width(payload.get("width")))

    @classmethod
    def coerce(cls, value: OptionsArg = None, **overrides: Any) -> "FastaOptions":
        return _coerce(cls, value, overrides)


OptionsArg = Union[None, ParseOptions, FormatOptions, FastaOptions, Mapping[str, Any]]


# camelCase spellings accepted alongside the field names
_ALIASES = {FormatOptions: {"indentNames"}}


def _option_keys(cls) -> set:
    return {f.name for f in fields(cls)} | _ALIASES.get(cls, set())


def _coerce(cls, value, overrides):
    if value is None:
        opts = cls()
    elif isinstance(value, cls):
        opts = value
    elif isinstance(value, Mapping):
        opts = cls.from_payload(value)
    else:
        raise TypeError(f"expected {cls.__name__}, a mapping or None, got {type(value).__name__}")
    unknown = sorted(set(overrides) - _option_keys(cls))
    if unknown:
        raise TypeError(f"{cls.__name__} got unexpected option(s): {', '.join(unknown)}")
    if overrides:
        opts = cls.from_payload({**opts.__dict__, **overrides})
    return opts


def parse_width(value: Any) -> Optional[int]:
    """``None``, ``0`` or ``False`` all mean unwrapped."""
    if value is None or value is False:
        return None
    width = to_int(value, min_value=0, name="width")
    return width or None


def to_bool(value: Any, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
    if value is None:
        return False
    raise ValueError(f"{name} must be a boolean")


def to_int(
    value: Any,
    *,
    name: str,
    min_value: Optional[int] = None,
) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if min_value is not None and parsed < min_value:
        raise ValueError(f"{name} must be >= {min_value}")
    return parsed
