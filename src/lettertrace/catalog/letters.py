"""Built-in A-Z letter catalog.

Every letter is authored on the 0-100 square as wide zones around its
centerlines. Straight strokes use straight_zone, curved strokes use
arc_zone, and S and U carry hand-authored polygons. All generated strokes
share one very forgiving band width, taken from ZoneConfig.
"""

import math
from functools import partial

from lettertrace.config import ZoneConfig
from lettertrace.core.geometry import arc_zone, straight_zone
from lettertrace.domain import Point, StrokeZone, TracingLetter

STROKE_WIDTH = ZoneConfig().stroke_width
DEFAULT_THRESHOLD = 0.75
RING_THRESHOLD = 0.7
LIGHT_THRESHOLD = 0.25


def _line(
    config: ZoneConfig,
    stroke_id: str,
    start: tuple[float, float],
    end: tuple[float, float],
    threshold: float = DEFAULT_THRESHOLD,
) -> StrokeZone:
    a = Point(*start)
    b = Point(*end)
    return StrokeZone(
        id=stroke_id,
        zone=straight_zone(a, b, config.stroke_width),
        display_path=f"M {a.x:g} {a.y:g} L {b.x:g} {b.y:g}",
        start_indicator=a,
        completion_threshold=threshold,
    )


def _arc(
    config: ZoneConfig,
    stroke_id: str,
    center: tuple[float, float],
    radius: float,
    start_angle: float,
    end_angle: float,
    display_path: str,
    start_indicator: tuple[float, float],
    threshold: float = DEFAULT_THRESHOLD,
) -> StrokeZone:
    return StrokeZone(
        id=stroke_id,
        zone=arc_zone(
            Point(*center),
            radius,
            start_angle,
            end_angle,
            config.stroke_width,
            config.arc_samples,
        ),
        display_path=display_path,
        start_indicator=Point(*start_indicator),
        completion_threshold=threshold,
    )


def _polygon(points: list[tuple[float, float]]) -> tuple[Point, ...]:
    return tuple(Point(x, y) for x, y in points)


def _bowl(config: ZoneConfig, stroke_id: str, cy: float) -> StrokeZone:
    # Right-facing half circle of radius 22 hanging off a stem at x=25
    top = cy - 22
    return _arc(
        config,
        stroke_id,
        (25, cy),
        22,
        -math.pi / 2,
        math.pi / 2,
        f"M 25 {top:g} A 22 22 0 0 1 25 {cy + 22:g}",
        (25, top),
    )


_STEM = (25, 10), (25, 90)


def build_catalog(config: ZoneConfig | None = None) -> tuple[TracingLetter, ...]:
    """Build the A-Z catalog with the given zone settings.

    Stroke centerlines, thresholds and texts are fixed. The band width and
    arc sampling of generated zones come from ``config``; the hand-authored
    S and U polygons are used as they are.

    Args:
        config: Zone authoring settings (defaults if None)

    Returns:
        Letters A to Z in order
    """
    config = config or ZoneConfig()
    line = partial(_line, config)
    arc = partial(_arc, config)
    bowl = partial(_bowl, config)

    return (
        TracingLetter(
            char="A",
            sound="ahh",
            word="Apple",
            emoji="🍎",
            strokes=(
                line("left-leg", (50, 10), (15, 90)),
                line("right-leg", (50, 10), (85, 90)),
                line("crossbar", (25, 55), (75, 55)),
            ),
        ),
        TracingLetter(
            char="B",
            sound="buh",
            word="Bear",
            emoji="🐻",
            strokes=(
                line("stem", *_STEM),
                bowl("top-bump", 32),
                bowl("bottom-bump", 68),
            ),
        ),
        TracingLetter(
            char="C",
            sound="kuh",
            word="Cat",
            emoji="🐱",
            strokes=(
                arc(
                    "curve",
                    (50, 50),
                    35,
                    -math.pi * 0.7,
                    math.pi * 0.7,
                    "M 85 25 A 35 35 0 1 0 85 75",
                    (80, 25),
                ),
            ),
        ),
        TracingLetter(
            char="D",
            sound="duh",
            word="Dog",
            emoji="🐕",
            strokes=(
                line("stem", *_STEM),
                arc(
                    "curve",
                    (25, 50),
                    40,
                    -math.pi / 2,
                    math.pi / 2,
                    "M 25 10 A 40 40 0 0 1 25 90",
                    (25, 10),
                ),
            ),
        ),
        TracingLetter(
            char="E",
            sound="eh",
            word="Elephant",
            emoji="🐘",
            strokes=(
                line("stem", *_STEM),
                line("top", (25, 10), (75, 10)),
                line("middle", (25, 50), (65, 50)),
                line("bottom", (25, 90), (75, 90)),
            ),
        ),
        TracingLetter(
            char="F",
            sound="fff",
            word="Fish",
            emoji="🐟",
            strokes=(
                line("stem", *_STEM),
                line("top", (25, 10), (75, 10)),
                line("middle", (25, 50), (60, 50)),
            ),
        ),
        TracingLetter(
            char="G",
            sound="guh",
            word="Giraffe",
            emoji="🦒",
            strokes=(
                arc(
                    "curve",
                    (50, 50),
                    35,
                    -math.pi * 0.7,
                    math.pi * 0.7,
                    "M 85 25 A 35 35 0 1 0 85 75",
                    (80, 25),
                ),
                StrokeZone(
                    id="bar",
                    zone=straight_zone(Point(50, 50), Point(85, 50), config.stroke_width),
                    display_path="M 50 50 L 85 50",
                    start_indicator=Point(85, 50),
                    completion_threshold=DEFAULT_THRESHOLD,
                ),
            ),
        ),
        TracingLetter(
            char="H",
            sound="huh",
            word="Hat",
            emoji="🧢",
            strokes=(
                line("left", (20, 10), (20, 90)),
                line("right", (80, 10), (80, 90)),
                line("cross", (20, 50), (80, 50)),
            ),
        ),
        TracingLetter(
            char="I",
            sound="ih",
            word="Igloo",
            emoji="🏠",
            strokes=(
                line("top", (30, 10), (70, 10)),
                line("stem", (50, 10), (50, 90)),
                line("bottom", (30, 90), (70, 90)),
            ),
        ),
        TracingLetter(
            char="J",
            sound="juh",
            word="Jellyfish",
            emoji="🪼",
            strokes=(
                line("top", (30, 10), (70, 10)),
                line("stem", (50, 10), (50, 70)),
                arc("hook", (35, 70), 15, 0, math.pi, "M 50 70 A 15 15 0 0 1 20 70", (50, 70)),
            ),
        ),
        TracingLetter(
            char="K",
            sound="kuh",
            word="Kite",
            emoji="🪁",
            strokes=(
                line("stem", *_STEM),
                line("upper", (75, 10), (25, 50)),
                line("lower", (35, 40), (75, 90)),
            ),
        ),
        TracingLetter(
            char="L",
            sound="lll",
            word="Lion",
            emoji="🦁",
            strokes=(
                line("stem", *_STEM),
                line("base", (25, 90), (75, 90)),
            ),
        ),
        TracingLetter(
            char="M",
            sound="mmm",
            word="Monkey",
            emoji="🐵",
            strokes=(
                line("left", (15, 90), (15, 10)),
                line("left-peak", (15, 10), (50, 50)),
                line("right-peak", (50, 50), (85, 10)),
                line("right", (85, 10), (85, 90)),
            ),
        ),
        TracingLetter(
            char="N",
            sound="nnn",
            word="Nest",
            emoji="🪺",
            strokes=(
                line("left", (20, 90), (20, 10)),
                line("diagonal", (20, 10), (80, 90)),
                line("right", (80, 90), (80, 10)),
            ),
        ),
        TracingLetter(
            char="O",
            sound="oh",
            word="Octopus",
            emoji="🐙",
            strokes=(
                arc(
                    "circle",
                    (50, 50),
                    35,
                    0,
                    math.pi * 2,
                    "M 85 50 A 35 35 0 1 1 85 49.99",
                    (85, 50),
                    RING_THRESHOLD,
                ),
            ),
        ),
        TracingLetter(
            char="P",
            sound="puh",
            word="Penguin",
            emoji="🐧",
            strokes=(
                line("stem", *_STEM),
                bowl("bump", 32),
            ),
        ),
        TracingLetter(
            char="Q",
            sound="kwuh",
            word="Queen",
            emoji="👑",
            strokes=(
                arc(
                    "circle",
                    (50, 45),
                    32,
                    0,
                    math.pi * 2,
                    "M 82 45 A 32 32 0 1 1 82 44.99",
                    (82, 45),
                    RING_THRESHOLD,
                ),
                line("tail", (60, 65), (85, 95)),
            ),
        ),
        TracingLetter(
            char="R",
            sound="rrr",
            word="Rabbit",
            emoji="🐰",
            strokes=(
                line("stem", *_STEM),
                bowl("bump", 32),
                line("leg", (40, 50), (75, 90)),
            ),
        ),
        TracingLetter(
            char="S",
            sound="sss",
            word="Snake",
            emoji="🐍",
            strokes=(
                StrokeZone(
                    id="curve",
                    zone=_polygon(
                        [
                            (75, 5), (85, 15), (75, 30),
                            (50, 40), (25, 50),
                            (15, 65), (25, 85), (50, 95),
                            (75, 85), (85, 75),
                            # inner edge, back up to the top
                            (70, 75), (55, 80), (40, 75),
                            (35, 65), (50, 55),
                            (65, 45), (60, 25),
                            (50, 15), (60, 5),
                        ]
                    ),
                    display_path=(
                        "M 75 15 C 50 5 25 20 25 35 C 25 50 50 50 50 50 "
                        "C 50 50 75 50 75 65 C 75 80 50 95 25 85"
                    ),
                    start_indicator=Point(75, 15),
                    completion_threshold=RING_THRESHOLD,
                ),
            ),
        ),
        TracingLetter(
            char="T",
            sound="tuh",
            word="Turtle",
            emoji="🐢",
            strokes=(
                line("top", (15, 10), (85, 10), LIGHT_THRESHOLD),
                line("stem", (50, 10), (50, 90), LIGHT_THRESHOLD),
            ),
        ),
        TracingLetter(
            char="U",
            sound="uh",
            word="Umbrella",
            emoji="☂️",
            strokes=(
                StrokeZone(
                    id="curve",
                    zone=_polygon(
                        [
                            (10, 10), (30, 10),
                            (30, 60),
                            (40, 80), (50, 90), (60, 80),
                            (70, 60),
                            (70, 10), (90, 10),
                            (90, 70),
                            (75, 95), (50, 100), (25, 95),
                            (10, 70),
                        ]
                    ),
                    display_path="M 20 10 L 20 70 Q 20 90 50 90 Q 80 90 80 70 L 80 10",
                    start_indicator=Point(20, 10),
                    completion_threshold=0.2,
                ),
            ),
        ),
        TracingLetter(
            char="V",
            sound="vvv",
            word="Violin",
            emoji="🎻",
            strokes=(
                line("left", (15, 10), (50, 90), LIGHT_THRESHOLD),
                line("right", (50, 90), (85, 10), LIGHT_THRESHOLD),
            ),
        ),
        TracingLetter(
            char="W",
            sound="wuh",
            word="Whale",
            emoji="🐋",
            strokes=(
                line("s1", (10, 10), (30, 90), LIGHT_THRESHOLD),
                line("s2", (30, 90), (50, 40), LIGHT_THRESHOLD),
                line("s3", (50, 40), (70, 90), LIGHT_THRESHOLD),
                line("s4", (70, 90), (90, 10), LIGHT_THRESHOLD),
            ),
        ),
        TracingLetter(
            char="X",
            sound="ks",
            word="Xylophone",
            emoji="🎹",
            strokes=(
                line("down-right", (15, 10), (85, 90), LIGHT_THRESHOLD),
                line("down-left", (85, 10), (15, 90), LIGHT_THRESHOLD),
            ),
        ),
        TracingLetter(
            char="Y",
            sound="yuh",
            word="Yak",
            emoji="🦬",
            strokes=(
                line("left-arm", (15, 10), (50, 50), LIGHT_THRESHOLD),
                line("right-arm", (85, 10), (50, 50), LIGHT_THRESHOLD),
                line("stem", (50, 50), (50, 90), LIGHT_THRESHOLD),
            ),
        ),
        TracingLetter(
            char="Z",
            sound="zzz",
            word="Zebra",
            emoji="🦓",
            strokes=(
                line("top", (15, 10), (85, 10), LIGHT_THRESHOLD),
                line("diagonal", (85, 10), (15, 90), LIGHT_THRESHOLD),
                line("bottom", (15, 90), (85, 90), LIGHT_THRESHOLD),
            ),
        ),
    )


TRACING_LETTERS: tuple[TracingLetter, ...] = build_catalog()
