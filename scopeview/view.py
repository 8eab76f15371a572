"""View settings: screen and print palettes, display options and version info."""

from __future__ import annotations

import colorsys
import enum
from dataclasses import dataclass, field

LAST_VERSION = "3.3.3"
FIRMWARE_VERSION = 0x0210

DEFAULT_FONT = "Arial"
DEFAULT_FONT_SIZE = 10
DEFAULT_CONDENSED = 87  # semi-condensed, in percent


class InterpolationMode(enum.Enum):
    """How samples are joined when a trace is drawn."""

    OFF = 0
    LINEAR = 1


class ToolBarArea(enum.IntFlag):
    """Where a tool panel such as the cursor grid is docked."""

    NONE = 0x0
    LEFT = 0x1
    RIGHT = 0x2
    TOP = 0x4
    BOTTOM = 0x8


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 0xFF

    def __post_init__(self) -> None:
        for value in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"colour channel out of range: {value}")

    def _hsv(self) -> tuple[float, float, int]:
        hue, sat, _ = colorsys.rgb_to_hsv(self.red / 255, self.green / 255, self.blue / 255)
        return hue, sat, max(self.red, self.green, self.blue)

    def _with_hsv(self, hue: float, sat: float, value: int) -> Color:
        r, g, b = colorsys.hsv_to_rgb(hue, sat, value / 255)
        return Color(round(r * 255), round(g * 255), round(b * 255), self.alpha)

    def _lighter(self, factor: int) -> Color:
        hue, sat, value = self._hsv()
        value = factor * value // 100
        if value > 255:
            sat = max(0.0, sat - (value - 255) / 255)
            value = 255
        return self._with_hsv(hue, sat, value)

    def darker(self, factor: int = 200) -> Color:
        """Return a darker colour; a factor of 200 halves the brightness."""
        if factor <= 0:
            return self
        if factor < 100:
            return self._lighter(10000 // factor)
        hue, sat, value = self._hsv()
        return self._with_hsv(hue, sat, value * 100 // factor)


@dataclass
class ColorValues:
    """The colours used to paint the scope screen."""

    axes: Color
    background: Color
    border: Color
    grid: Color
    markers: Color
    text: Color
    spectrum: list[Color] = field(default_factory=list)
    voltage: list[Color] = field(default_factory=list)


def screen_colors() -> ColorValues:
    """Default palette for the display."""
    return ColorValues(
        axes=Color(0x7F, 0x7F, 0x7F),
        background=Color(0x00, 0x00, 0x00),
        border=Color(0xFF, 0xFF, 0xFF),
        grid=Color(0xC0, 0xC0, 0xC0),
        markers=Color(0xC0, 0xC0, 0xC0),
        text=Color(0xFF, 0xFF, 0xFF),
    )


def print_colors() -> ColorValues:
    """Default palette for printing and exported images."""
    return ColorValues(
        axes=Color(0x40, 0x40, 0x40),
        background=Color(0xFF, 0xFF, 0xFF),
        border=Color(0x00, 0x00, 0x00),
        grid=Color(0x40, 0x40, 0x40),
        markers=Color(0x40, 0x40, 0x40),
        text=Color(0x00, 0x00, 0x00),
    )


@dataclass
class ViewSettings:
    """All settings that affect how the scope is displayed."""

    screen: ColorValues = field(default_factory=screen_colors)
    printer: ColorValues = field(default_factory=print_colors)
    antialiasing: bool = True
    digital_phosphor: bool = False
    digital_phosphor_depth: int = 8
    interpolation: InterpolationMode = InterpolationMode.LINEAR
    printer_color_images: bool = True
    zoom_height_index: int = 2
    zoom_image: bool = True
    zoom: bool = False
    export_scale_value: int = 1
    cursor_grid_position: ToolBarArea = ToolBarArea.RIGHT
    cursors_visible: bool = False
    colors: ColorValues | None = None
    font_size: int = DEFAULT_FONT_SIZE
    style_fusion: bool = False
    theme: int = 0
    screen_height: int = 0
    screen_width: int = 0

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = self.screen

    def digital_phosphor_draws(self) -> int:
        """Number of graphs kept on screen at one time."""
        return self.digital_phosphor_depth if self.digital_phosphor else 1

    def use_print_colors(self) -> bool:
        """Switch to the print palette if enabled; return True if switched."""
        if self.printer_color_images:
            self.colors = self.printer
            return True
        return False

    def use_screen_colors(self) -> bool:
        """Switch back to the screen palette; return True if it changed."""
        if self.colors is not self.screen:
            self.colors = self.screen
            return True
        return False


def firmware_version_string(version: int) -> str:
    """Render a BCD-like 16-bit firmware version such as 0x0210 as '2.10'."""
    if not 0 <= version <= 0xFFFF:
        raise ValueError(f"firmware version out of range: {version}")
    return f"{version >> 8:x}.{version & 0xFF:02x}"