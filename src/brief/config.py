from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InvalidConfigurationError

# Cells hold C `long` values.
CELL_MIN = -(2 ** 63)
CELL_MAX = 2 ** 63 - 1


class _Selector(Enum):
    """Enum selectable by its one-letter flag value or by member name."""

    @classmethod
    def from_selector(cls, text):
        if isinstance(text, cls):
            return text
        raw = str(text).strip()
        for member in cls:
            if raw == member.value or raw.upper() == member.name:
                return member
        label = _LABELS.get(cls.__name__, cls.__name__)
        choices = ', '.join(f"{m.value} ({m.name.lower()})" for m in cls)
        raise InvalidConfigurationError(
            message=f"invalid {label}: {raw!r} (expected one of {choices})",
            option=label,
        )


_LABELS = {
    'Policy': 'boundary behaviour',
    'EofPolicy': 'EOF behaviour',
    'Mode': 'mode',
}


class Policy(_Selector):
    """What to do when a value or the cursor leaves its domain."""
    ERROR = 'e'
    IGNORE = 'i'
    WRAP = 'w'


class EofPolicy(_Selector):
    """Value stored by ',' when input is exhausted."""
    ZERO = '0'
    MIN = 'a'
    MAX = 'b'
    NEG_ONE = 'n'
    UNCHANGED = 'x'


class Mode(_Selector):
    DUMP = 'd'
    RUN = 'r'


@dataclass(frozen=True)
class Config:
    min_value: int = 0
    max_value: int = 255
    cell_count: int = 30000
    eof: EofPolicy = EofPolicy.ZERO
    value_policy: Policy = Policy.WRAP
    cursor_policy: Policy = Policy.ERROR
    mode: Mode = Mode.RUN

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for name, cls in (('eof', EofPolicy), ('value_policy', Policy),
                          ('cursor_policy', Policy), ('mode', Mode)):
            if not isinstance(getattr(self, name), cls):
                raise InvalidConfigurationError(
                    message=f"{name} must be a {cls.__name__}, got {getattr(self, name)!r}",
                    option=name,
                )
        if self.min_value > self.max_value:
            raise InvalidConfigurationError(
                message=f"minimum cell value {self.min_value} exceeds maximum {self.max_value}",
                option='min_value',
            )
        for name in ('min_value', 'max_value'):
            value = getattr(self, name)
            if not CELL_MIN <= value <= CELL_MAX:
                raise InvalidConfigurationError(
                    message=f"{name} {value} does not fit in a 64-bit cell",
                    option=name,
                )
        if self.cell_count < 1:
            raise InvalidConfigurationError(
                message=f"cell count must be positive, got {self.cell_count}",
                option='cell_count',
            )

    @property
    def last_cell(self) -> int:
        return self.cell_count - 1

    @classmethod
    def from_selectors(
        cls,
        *,
        min_value: int = 0,
        max_value: int = 255,
        cell_count: int = 30000,
        eof: Optional[str] = None,
        value_policy: Optional[str] = None,
        cursor_policy: Optional[str] = None,
        mode: Optional[str] = None,
    ) -> "Config":
        """Build a Config from raw flag strings such as ``'w'`` or ``'x'``."""
        return cls(
            min_value=min_value,
            max_value=max_value,
            cell_count=cell_count,
            eof=EofPolicy.ZERO if eof is None else EofPolicy.from_selector(eof),
            value_policy=Policy.WRAP if value_policy is None else Policy.from_selector(value_policy),
            cursor_policy=Policy.ERROR if cursor_policy is None else Policy.from_selector(cursor_policy),
            mode=Mode.RUN if mode is None else Mode.from_selector(mode),
        )
