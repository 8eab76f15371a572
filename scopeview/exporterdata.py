"""Collect the sample columns of one captured frame for export."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class SampleValues:
    """A run of equally spaced samples."""

    samples: list[float] = field(default_factory=list)
    interval: float = 0.0


@dataclass
class ChannelData:
    """Voltage trace and spectrum of one channel."""

    voltage: SampleValues = field(default_factory=SampleValues)
    spectrum: SampleValues = field(default_factory=SampleValues)


@dataclass
class ChannelConfig:
    """Name and on/off state of one voltage or spectrum channel."""

    name: str
    used: bool = False


@dataclass
class ScopeConfig:
    """Voltage and spectrum channel settings of the scope."""

    voltage: list[ChannelConfig] = field(default_factory=list)
    spectrum: list[ChannelConfig] = field(default_factory=list)


@dataclass(frozen=True)
class ExporterData:
    """The columns an exporter writes, one entry per channel (None if unused)."""

    channels_count: int
    max_row: int
    spectrum_used: bool
    time_interval: float
    freq_interval: float
    voltage_data: tuple[SampleValues | None, ...]
    spectrum_data: tuple[SampleValues | None, ...]

    @classmethod
    def from_result(cls, data: Sequence[ChannelData | None], scope: ScopeConfig) -> ExporterData:
        """Pick the used channels of a frame according to the scope settings."""
        count = len(scope.voltage)
        voltage: list[SampleValues | None] = [None] * count
        spectrum: list[SampleValues | None] = [None] * count
        max_row = 0
        time_interval = 0.0
        freq_interval = 0.0
        spectrum_used = False

        for channel, (vconf, sconf) in enumerate(zip(scope.voltage, scope.spectrum)):
            channel_data = data[channel] if channel < len(data) else None
            if channel_data is None:
                continue
            if vconf.used:
                voltage[channel] = channel_data.voltage
                max_row = max(max_row, len(channel_data.voltage.samples))
                time_interval = channel_data.voltage.interval
            if sconf.used:
                spectrum[channel] = channel_data.spectrum
                max_row = max(max_row, len(channel_data.spectrum.samples))
                freq_interval = channel_data.spectrum.interval
                spectrum_used = True

        return cls(
            channels_count=count,
            max_row=max_row,
            spectrum_used=spectrum_used,
            time_interval=time_interval,
            freq_interval=freq_interval,
            voltage_data=tuple(voltage),
            spectrum_data=tuple(spectrum),
        )