"""Demo programs exercising each draw path of the raster engine."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterator

from termpixel_color import Color, Rgb, TerminalColor, from_hsv
from termpixel_core import PerformanceController, get_logger
from termpixel_raster import Pixel, Point, Rectangle, TerminalDisplay


logger = get_logger("demo")


@dataclass
class WaveStats:
    frames: int = 0
    elapsed_s: float = 0.0
    fps: float = 0.0
    delay_ms: int = 0


def draw_line(display: TerminalDisplay) -> int:
    """Diagonal line from the origin, drawn point by point."""
    width, height = display.size()
    length = min(width, height)
    display.clear(Color.BACKGROUND)
    display.draw_points(Pixel(Point(i, i), Color.FOREGROUND) for i in range(length))
    display.flush()
    return length


def draw_square(
    display: TerminalDisplay,
    area: Rectangle = Rectangle(x=1, y=1, width=6, height=6),
    stroke: TerminalColor = Color.RED,
    fill: TerminalColor = Color.GREEN,
) -> None:
    """Stroked square deliberately misaligned with the cell grid."""
    display.fill_solid(area, stroke)
    if area.width > 2 and area.height > 2:
        display.fill_solid(Rectangle(x=area.x + 1, y=area.y + 1, width=area.width - 2, height=area.height - 2), fill)
    display.flush()


def wave_colors(area: Rectangle, elapsed_s: float, speed: float) -> Iterator[Rgb]:
    shift = elapsed_s * speed
    for point in area.points():
        yield from_hsv(point.x - point.y + shift)


def run_color_wave(
    display: TerminalDisplay,
    seconds: float | None = None,
    speed: float = 200.0,
    delay_ms: int = 0,
    perf: PerformanceController | None = None,
    on_frame: Callable[[int], None] | None = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> WaveStats:
    """Animate a diagonal rainbow until ``seconds`` elapse (forever if None)."""
    stats = WaveStats(delay_ms=delay_ms)
    start = clock()
    last_sample = start
    sampled_frames = 0

    while True:
        now = clock()
        elapsed = now - start
        if seconds is not None and elapsed >= seconds:
            break

        box = display.bounding_box()
        display.fill_contiguous(box, wave_colors(box, elapsed, speed))
        display.flush()
        stats.frames += 1
        sampled_frames += 1
        if on_frame is not None:
            on_frame(stats.frames)

        if perf is not None and now - last_sample >= 1.0:
            fps = sampled_frames / (now - last_sample)
            budget = perf.sample(fps, stats.delay_ms)
            if budget.warning:
                logger.warning(
                    "frame budget %s: fps=%.1f cpu=%.1f rss_mb=%.1f",
                    budget.warning,
                    budget.fps,
                    budget.cpu_percent,
                    budget.rss_mb,
                    extra={"event": "frame_budget"},
                )
            stats.delay_ms = budget.recommended_delay_ms
            last_sample = now
            sampled_frames = 0

        if stats.delay_ms:
            sleep(stats.delay_ms / 1000)

    stats.elapsed_s = clock() - start
    stats.fps = stats.frames / stats.elapsed_s if stats.elapsed_s > 0 else 0.0
    return stats
