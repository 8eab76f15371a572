"""Snapshot exporters that write captured samples as CSV or JSON."""

from __future__ import annotations

import abc
import enum
import json
import locale
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .exporterdata import ChannelData, ExporterData, ScopeConfig

log = logging.getLogger(__name__)

PathChooser = Callable[[], "str | Path | None"]


class ExporterType(enum.Enum):
    """Whether an exporter keeps one frame or collects continuously."""

    SNAPSHOT = "snapshot"
    CONTINUOUS = "continuous"


class Exporter(abc.ABC):
    """Base for exporters registered with an exporter registry."""

    name = ""
    format = ""
    type = ExporterType.SNAPSHOT

    def __init__(self, choose_path: PathChooser | None = None) -> None:
        self.choose_path = choose_path
        self.registry: Any = None
        self.data: Sequence[ChannelData | None] | None = None

    def create(self, registry: Any) -> None:
        """Attach to a registry and drop any collected data."""
        self.registry = registry
        self.data = None

    def samples(self, data: Sequence[ChannelData | None]) -> bool:
        """Take a frame; return False since a snapshot needs only one."""
        self.data = data
        return False

    def progress(self) -> float:
        """1.0 once a frame has been received, else 0.0."""
        return 1.0 if self.data is not None else 0.0

    @abc.abstractmethod
    def _serialize(self, dto: ExporterData, scope: ScopeConfig) -> str:
        """Render the collected data as file content."""

    def save(self) -> bool:
        """Write the collected frame to the chosen file; return True on success."""
        if self.data is None or self.choose_path is None:
            return False
        path = self.choose_path()
        if path is None:
            return False
        scope = self.registry.settings.scope
        dto = ExporterData.from_result(self.data, scope)
        try:
            with open(path, "w", encoding="utf-8") as stream:
                stream.write(self._serialize(dto, scope))
        except OSError as error:
            log.error("write error %s: %s", path, error)
            return False
        return True


def _number(value: float, decimal_point: str) -> str:
    return f"{value:g}".replace(".", decimal_point)


def format_csv(dto: ExporterData, scope: ScopeConfig, decimal_point: str = ".") -> str:
    """Render the data as CSV; ';' separates fields when ',' is the decimal point."""
    sep = ";" if decimal_point == "," else ","
    header = ['"t / s"']
    header += [
        f'"{scope.voltage[ch].name} / V"' for ch, values in enumerate(dto.voltage_data) if values is not None
    ]
    if dto.spectrum_used:
        header.append('"f / Hz"')
        header += [
            f'"{scope.spectrum[ch].name} / dB"' for ch, values in enumerate(dto.spectrum_data) if values is not None
        ]
    lines = [sep.join(header)]

    def cell(values, row):
        return _number(values.samples[row], decimal_point) if row < len(values.samples) else ""

    for row in range(dto.max_row):
        fields = [_number(dto.time_interval * row, decimal_point)]
        fields += [cell(values, row) for values in dto.voltage_data if values is not None]
        if dto.spectrum_used:
            fields.append(_number(dto.freq_interval * row, decimal_point))
            fields += [cell(values, row) for values in dto.spectrum_data if values is not None]
        lines.append(sep.join(fields))
    return "\n".join(lines) + "\n"


def format_json(dto: ExporterData, scope: ScopeConfig) -> str:
    """Render the data as a JSON array with one object per sample row."""
    indent = "  "

    def fixed(value: float) -> str:
        return f"{value:.10f}"

    def entry(key: str, value: str) -> str:
        return f"{indent}{indent}{json.dumps(key)}: {value}"

    def cell(values, row):
        return fixed(values.samples[row]) if row < len(values.samples) else "null"

    out = ["[\n"]
    for row in range(dto.max_row):
        members = [entry("time", fixed(dto.time_interval * row))]
        members += [
            entry(scope.voltage[ch].name, cell(values, row))
            for ch, values in enumerate(dto.voltage_data)
            if values is not None
        ]
        if dto.spectrum_used:
            members.append(entry("freq", fixed(dto.freq_interval * row)))
            members += [
                entry(scope.spectrum[ch].name, cell(values, row))
                for ch, values in enumerate(dto.spectrum_data)
                if values is not None
            ]
        out.append(f"{indent}{{\n")
        out.append(",\n".join(members))
        out.append(f"\n{indent}}}")
        if row != dto.max_row - 1:
            out.append(",")
        out.append("\n")
    out.append("]\n")
    return "".join(out)


class CsvExporter(Exporter):
    """Writes one frame as comma-separated values."""

    name = "Export &CSV .."
    format = "CSV"
    type = ExporterType.SNAPSHOT

    def render(self, dto: ExporterData, scope: ScopeConfig, decimal_point: str = ".") -> str:
        return format_csv(dto, scope, decimal_point)

    def _serialize(self, dto: ExporterData, scope: ScopeConfig) -> str:
        return self.render(dto, scope, locale.localeconv()["decimal_point"])


class JsonExporter(Exporter):
    """Writes one frame as a JSON array."""

    name = "Export &JSON .."
    format = "JSON"
    type = ExporterType.SNAPSHOT

    def render(self, dto: ExporterData, scope: ScopeConfig) -> str:
        return format_json(dto, scope)

    def _serialize(self, dto: ExporterData, scope: ScopeConfig) -> str:
        return self.render(dto, scope)