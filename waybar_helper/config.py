"""Output configuration for the wayeyes focus indicator.

The configuration is built once at startup from the defaults below plus an
ordered list of `--flag value` overrides, and is read-only afterwards.
"""

import re
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigurationError

U32_MAX = 2**32 - 1

DEFAULT_TEMPLATE = (
    '{"text" : "{icon}", "tooltip" : "{tooltip}", '
    '"class" : "{class}", "percentage" : "{percentage}" }'
)

_PERCENTAGE_RE = re.compile(r"\+?[0-9]+")


class Category(str, Enum):
    """Display category of the focused window."""

    NATIVE = "native"      # xdg-shell (native Wayland)
    COMPAT = "compat"      # XWayland
    UNKNOWN = "unknown"    # No window, or any other shell


class OutputRecord(BaseModel):
    """Values substituted into the template for one category.

    Missing strings render as empty strings.
    """

    model_config = ConfigDict(frozen=True)

    icon: Optional[str] = None
    tooltip: Optional[str] = None
    class_label: Optional[str] = None
    percentage: int = Field(default=0, ge=0, le=U32_MAX)


class Configuration(BaseModel):
    """Complete wayeyes configuration.

    Defaults use Nerd Font glyphs for the icons.
    """

    model_config = ConfigDict(frozen=True)

    native: OutputRecord = Field(default_factory=lambda: OutputRecord(
        icon="\uf584",
        tooltip="wayland native",
        class_label="wayland",
        percentage=100,
    ))
    compat: OutputRecord = Field(default_factory=lambda: OutputRecord(
        icon="\uf5a5",
        tooltip="xwayland",
        class_label="xwayland",
        percentage=50,
    ))
    unknown: OutputRecord = Field(default_factory=lambda: OutputRecord(
        icon="\uf567",
        tooltip="unknown",
        class_label="unknown",
        percentage=0,
    ))
    template: str = DEFAULT_TEMPLATE

    def record_for(self, category: Category) -> OutputRecord:
        """Get the output record for a category."""
        return getattr(self, Category(category).value)

    @classmethod
    def from_overrides(cls, args: Sequence[str]) -> "Configuration":
        """Build a configuration from defaults plus `--flag value` overrides.

        Overrides are applied in order, so a repeated flag keeps its last value.
        Nothing is returned unless every override is valid.

        Args:
            args: Flag/value tokens, e.g. ["--xdg-icon", "W", "--format", "{icon}"]

        Returns:
            Frozen Configuration

        Raises:
            ConfigurationError: Unknown flag, flag without a value, or a
                percentage that is not an unsigned 32-bit integer
        """
        defaults = cls()
        records = {
            category: defaults.record_for(category).model_dump()
            for category in Category
        }
        template = defaults.template

        i = 0
        while i < len(args):
            flag = args[i]
            i += 1

            if flag not in OVERRIDE_FLAGS:
                raise ConfigurationError(f"argument parse error: {flag}", flag=flag)
            if i >= len(args):
                raise ConfigurationError(f"missing value for {flag}", flag=flag)

            value = args[i]
            i += 1

            category, field = OVERRIDE_FLAGS[flag]
            if category is None:
                template = value
            elif field == "percentage":
                records[category][field] = parse_percentage(flag, value)
            else:
                records[category][field] = value

        return cls(
            template=template,
            **{category.value: OutputRecord(**record) for category, record in records.items()},
        )


def parse_percentage(flag: str, value: str) -> int:
    """Parse a percentage override as an unsigned 32-bit integer.

    Raises:
        ConfigurationError: If value is not numeric or out of range
    """
    name = flag.lstrip("-")
    if not _PERCENTAGE_RE.fullmatch(value):
        raise ConfigurationError(
            f"{name} parsing error: invalid digit found in {value!r}",
            flag=flag,
            value=value,
        )

    percentage = int(value)
    if percentage > U32_MAX:
        raise ConfigurationError(
            f"{name} parsing error: number too large to fit in target type",
            flag=flag,
            value=value,
        )
    return percentage


# Flag prefix -> (category, human label used in usage text)
_PREFIXES: List[Tuple[str, Category, str]] = [
    ("xdg", Category.NATIVE, "xdg window"),
    ("xwayland", Category.COMPAT, "xwayland window"),
    ("unknown", Category.UNKNOWN, "unknown window"),
]

# Flag suffix -> OutputRecord field
_FIELDS: List[Tuple[str, str]] = [
    ("icon", "icon"),
    ("tooltip", "tooltip"),
    ("class", "class_label"),
    ("percentage", "percentage"),
]


def _build_flag_table() -> Dict[str, Tuple[Optional[Category], str]]:
    table: Dict[str, Tuple[Optional[Category], str]] = {"--format": (None, "template")}
    for prefix, category, _label in _PREFIXES:
        for suffix, field in _FIELDS:
            table[f"--{prefix}-{suffix}"] = (category, field)
    return table


OVERRIDE_FLAGS = _build_flag_table()


def usage_lines(exe: str, command: str = "wayeyes", with_flags: bool = True) -> List[str]:
    """Usage text, one line per accepted flag."""
    lines = [f"{exe} {command}"]
    if not with_flags:
        return lines

    lines.append("\t\t\t[--format <format string>]")
    for prefix, _category, label in _PREFIXES:
        for suffix, _field in _FIELDS:
            lines.append(f"\t\t\t[--{prefix}-{suffix} <{suffix} for {label}>]")
    return lines
