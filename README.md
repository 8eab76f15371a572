# scopeview

The display model of a digital storage oscilloscope, kept separate from any GUI
toolkit. It holds the view settings and colour palettes, computes the geometry of
the graticule and of the measurement cursors, turns mouse and wheel input into
marker movements, stores a history of recent graphs for a digital phosphor
display, and writes captured sample frames to CSV or JSON.

## Installation

```
pip install scopeview
```

To run the tests as well:

```
pip install "scopeview[test]"
pytest
```

## Modules

- `scopeview.view`
  - `Color`: an RGBA colour with 8-bit channels. `darker(factor=200)` lowers the
    brightness; 200 halves it, and a factor below 100 makes the colour lighter.
  - `ColorValues` and the default palettes `screen_colors()` and `print_colors()`.
  - `ViewSettings`: display options such as `digital_phosphor`, `interpolation`
    (`InterpolationMode`), `zoom` and `cursor_grid_position` (`ToolBarArea`).
    `digital_phosphor_draws()` returns how many graphs stay on screen.
    `use_print_colors()` and `use_screen_colors()` switch `colors` between the two
    palettes and return whether anything changed.
  - `firmware_version_string(version)` renders a 16-bit version such as `0x0210`
    as `"2.10"`.
- `scopeview.exporterdata`
  - `SampleValues`, `ChannelData`, `ChannelConfig` and `ScopeConfig` describe one
    captured frame and the channel settings.
  - `ExporterData.from_result(data, scope)` keeps only the channels that are in
    use and records the row count and the time and frequency intervals.
- `scopeview.exporters`
  - `format_csv(dto, scope, decimal_point=".")`: a header row such as
    `"t / s","CH1 / V"`, followed by one row per sample. When `","` is the decimal
    point, the fields are separated by `;`.
  - `format_json(dto, scope)`: a JSON array with one object per sample row. The
    values are written with ten decimal places, and missing samples as `null`.
  - `Exporter`, the base class, and the snapshot exporters `CsvExporter` and
    `JsonExporter`. Each takes a `choose_path` callable that returns the target
    file path, or `None` to cancel. `save()` writes the frame it last received.
    `CsvExporter` uses the decimal point of the current locale.
- `scopeview.registry`
  - `ExporterRegistry(device_specification=None, settings=None)`: `settings` must
    have `scope` and `export_processed_samples`. Raw frames come in through
    `add_raw_samples()` and processed frames through `input()`. Which of the two
    is used depends on `export_processed_samples`. An exporter that has taken its
    frame waits until `check_for_waiting_exporters()` saves it. That call reports
    `"Data saved"` or `"No data exported"` to `status_listeners` and then resets
    the exporter. `progress_listeners` are called whenever an exporter starts
    waiting. Iterating over the registry yields all registered exporters.
  - `ExporterProcessor(registry).process(frame)` passes a raw frame to the registry.
- `scopeview.grid`
  - `generate_grid(divs_time=10, divs_voltage=8, divs_sub=5)` returns a `Grid` with
    the vertices of the dots, the axes with their tick marks and crosses, and the
    border.
  - `trigger_line(value, gain, offset)` returns the horizontal line at a trigger
    level.
- `scopeview.graph`
  - `Graph.write_data(voltage, histogram, spectrum)` packs the traces of all
    channels into one buffer and records a `Span` for each trace.
  - `GraphHistory.push(..., depth=n)` keeps the newest `n` graphs, newest first.
- `scopeview.cursors`
  - `CursorShape`, `ScopeCursor`, `cursor_vertices(cursor)` (the outline of a
    cursor) and `snap_marker(cursor, x, y)` (which marker the pointer grabs, if
    any).
- `scopeview.scope`
  - `ScopeView` holds the time cursor followed by the voltage and spectrum
    cursors. It converts pixel positions to divisions with `pos_to_scope_pos()`.
    Pointer input goes to `mouse_press`, `mouse_move`, `mouse_release`,
    `mouse_double_click` and `wheel`, with buttons given as `MouseButton`. New
    trace frames go to `show_data()`. Moves are reported to
    `marker_moved_listeners` and right-button measurements to
    `cursor_measurement_listeners`. `create_zoomed()` builds a view that
    magnifies the range between the time markers and cannot move those markers
    itself.

## Example

```python
from types import SimpleNamespace

from scopeview.exporterdata import ChannelConfig, ChannelData, ExporterData, SampleValues, ScopeConfig
from scopeview.exporters import CsvExporter, format_csv
from scopeview.registry import ExporterProcessor, ExporterRegistry

scope = ScopeConfig(
    voltage=[ChannelConfig(name="CH1", used=True), ChannelConfig(name="CH2")],
    spectrum=[ChannelConfig(name="SP1"), ChannelConfig(name="SP2")],
)
frame = [
    ChannelData(voltage=SampleValues([0.0, 0.5, 1.0], interval=0.001)),
    ChannelData(),
]

print(format_csv(ExporterData.from_result(frame, scope), scope))
# "t / s","CH1 / V"
# 0,0
# 0.001,0.5
# 0.002,1

settings = SimpleNamespace(scope=scope, export_processed_samples=False)
registry = ExporterRegistry(settings=settings)
registry.status_listeners.append(print)

exporter = CsvExporter(choose_path=lambda: "capture.csv")
registry.register_exporter(exporter)
registry.set_exporter_enabled(exporter, True)

ExporterProcessor(registry).process(frame)
registry.check_for_waiting_exporters()  # writes capture.csv, prints "Export &CSV .. Data saved"
```

## What it does not do

The package does not draw anything. It produces vertex lists, colours and
cursor state, and a caller with a graphics toolkit paints them. It does not
talk to oscilloscope hardware or acquire samples. It does not open file
dialogs: the exporters get their target path from the `choose_path` callable
you give them. It provides no command-line program.