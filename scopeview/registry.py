"""Registry that feeds captured frames to exporters and tracks their state."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any

from .exporterdata import ChannelData
from .exporters import Exporter

Frame = Sequence[ChannelData | None]
StatusListener = Callable[[str, str], None]
ProgressListener = Callable[[], None]


class ExporterRegistry:
    """Holds all exporters, the enabled ones and those waiting to be saved.

    ``settings`` must provide ``export_processed_samples`` and ``scope``.
    Listeners in ``status_listeners`` are called with the exporter name and
    a status text; listeners in ``progress_listeners`` are called without
    arguments whenever an exporter starts waiting to be saved.
    """

    def __init__(self, device_specification: Any = None, settings: Any = None) -> None:
        self.device_specification = device_specification
        self.settings = settings
        self.status_listeners: list[StatusListener] = []
        self.progress_listeners: list[ProgressListener] = []
        self._exporters: list[Exporter] = []
        self._enabled: list[Exporter] = []
        self._waiting: dict[Exporter, None] = {}

    def _progress_changed(self) -> None:
        for listener in self.progress_listeners:
            listener()

    def _status_changed(self, name: str, status: str) -> None:
        for listener in self.status_listeners:
            listener(name, status)

    def _process(self, data: Frame, exporter: Exporter) -> bool:
        """Hand a frame to one exporter; return True if it has finished."""
        if not exporter.samples(data):
            self._waiting[exporter] = None
            self._progress_changed()
            return True
        return False

    def _feed(self, data: Frame) -> None:
        self._enabled = [exporter for exporter in self._enabled if not self._process(data, exporter)]

    def add_raw_samples(self, data: Frame) -> None:
        """Feed unprocessed samples, unless processed samples are exported."""
        if self.settings.export_processed_samples:
            return
        self._feed(data)

    def input(self, data: Frame) -> None:
        """Feed processed samples, if processed samples are exported."""
        if not self.settings.export_processed_samples:
            return
        self._feed(data)

    def register_exporter(self, exporter: Exporter) -> None:
        """Make an exporter available and attach it to this registry."""
        self._exporters.append(exporter)
        exporter.create(self)

    @property
    def enabled(self) -> tuple[Exporter, ...]:
        """Exporters currently collecting samples."""
        return tuple(self._enabled)

    @property
    def waiting(self) -> tuple[Exporter, ...]:
        """Exporters waiting to be saved."""
        return tuple(self._waiting)

    def set_exporter_enabled(self, exporter: Exporter, enabled: bool) -> None:
        """Start or stop an exporter collecting samples."""
        was_in_list = exporter in self._enabled
        self._enabled = [item for item in self._enabled if item is not exporter]

        if enabled:
            # An exporter still waiting to be saved is reset instead.
            if exporter in self._waiting:
                del self._waiting[exporter]
                exporter.create(self)
            self._enabled.append(exporter)
        elif was_in_list:
            if exporter.progress() > 0:
                self._waiting[exporter] = None
                self._progress_changed()
            else:
                exporter.create(self)

    def check_for_waiting_exporters(self) -> None:
        """Save every waiting exporter, report the outcome and reset it."""
        for exporter in self._waiting:
            if exporter.save():
                self._status_changed(exporter.name, "Data saved")
            else:
                self._status_changed(exporter.name, "No data exported")
            exporter.create(self)
        self._waiting.clear()

    def __iter__(self) -> Iterator[Exporter]:
        return iter(self._exporters)


class ExporterProcessor:
    """Post-processing step that passes raw frames to a registry."""

    def __init__(self, registry: ExporterRegistry) -> None:
        self.registry = registry

    def process(self, data: Frame) -> None:
        self.registry.add_raw_samples(data)