# spanda

Small, dependency-free building blocks for animation in Python. Everything is
driven by time you supply: call `update(dt)` once per frame with the seconds
elapsed, then read the current value. Nothing here owns a clock or a window,
so the results can be written to any target: a canvas, an SVG document, a
game object or a terminal UI.

## What is included

| Module               | Provides                                                          |
|----------------------|-------------------------------------------------------------------|
| `spanda.interpolate` | `lerp` for numbers, sequences of numbers, and objects with a `lerp(other, t)` method |
| `spanda.path`        | `BezierPath`, weighted multi-segment `MotionPath`, `MotionPathTween` |
| `spanda.keyframe`    | `KeyframeTrack` with `Keyframe` stops and `Loop` modes            |
| `spanda.morph`       | `MorphPath` between two point lists, and `resample`               |
| `spanda.inertia`     | `Inertia` and multi-axis `InertiaN` with `InertiaConfig` presets  |
| `spanda.arc_length`  | `ArcLengthTable` for constant-speed traversal, `tangent_angle`    |
| `spanda.motion_path` | `CompoundPath` built from `MoveTo`, `LineTo`, `QuadTo`, `CubicTo`, `Close` |
| `spanda.split_text`  | `SplitText` with `SplitChar` and `SplitWord` metadata             |

## Installation

```
pip install spanda
```

Python 3.10 or newer is required.

## Easing

Wherever an easing is accepted (`Keyframe`, `KeyframeTrack.push`,
`MotionPathTween`, `MorphPath`), it is any callable that maps progress in
`[0, 1]` to eased progress. Without one, progress is used as is (linear).

## Examples

### Bezier curves and motion paths

```python
from spanda.path import BezierPath, MotionPath, MotionPathTween

curve = BezierPath.cubic((0.0, 0.0), (0.0, 100.0), (100.0, 100.0), (100.0, 0.0))
x, y = curve.evaluate(0.5)   # t is clamped to [0, 1]

path = MotionPath().line((0.0, 0.0), (100.0, 0.0)).line((100.0, 0.0), (100.0, 100.0))
tween = MotionPathTween(path, duration=2.0, easing=lambda t: t * t)
tween.update(1.0)
tween.value()   # (50.0, 0.0)
```

Each `MotionPath` segment takes a share of progress in proportion to its
`weight` (1.0 by default). Evaluating an empty path raises `ValueError`.

### Keyframe tracks

```python
from spanda.keyframe import KeyframeTrack

track = KeyframeTrack()
track.push(0.0, 0.0)
track.push(1.0, 100.0)

track.value_at(0.5)   # 50.0, evaluated without touching playback state
track.update(0.25)
track.value()         # 25.0
track.is_complete()   # False
```

Keyframes are kept sorted by time. `Loop` chooses what happens at the end:
`Loop.ONCE` (the default), a fixed number of repeats with `Loop.times(n)`,
`Loop.FOREVER`, or `Loop.PING_PONG` back and forth. Evaluating an empty track
raises `ValueError`.

### Inertia

```python
from spanda.inertia import Inertia, InertiaConfig

fling = Inertia(InertiaConfig.default_flick(), velocity=500.0)
while fling.update(1 / 60):
    pass
fling.is_settled()   # True
fling.position()     # distance coasted
```

Friction is normalised to 60 frames per second, so the distance travelled
hardly depends on the frame rate. `InertiaConfig.heavy()` coasts longer and
`InertiaConfig.snappy()` stops sooner. `InertiaN` does the same on every
component of a number or a sequence, such as `(x, y)`, and returns positions
in the shape it was given.

### Shape morphing

```python
from spanda.morph import MorphPath, resample

triangle = [(0.0, 0.0), (50.0, 100.0), (100.0, 0.0)]
square = [(0.0, 0.0), (0.0, 100.0), (100.0, 100.0), (100.0, 0.0)]

morph = MorphPath(triangle, square, duration=1.0)
morph.update(0.5)
points = morph.value()   # four points, halfway between the shapes

resample([(0.0, 0.0), (100.0, 0.0)], 5)   # five evenly spaced points
```

When the two shapes have different point counts, the shorter one is
resampled along its arc length to match the longer.

### Compound paths

```python
from spanda.motion_path import CompoundPath, CubicTo, LineTo, MoveTo

path = CompoundPath([
    MoveTo((0.0, 0.0)),
    CubicTo(control1=(50.0, 100.0), control2=(100.0, 100.0), end=(150.0, 0.0)),
    LineTo((200.0, 0.0)),
])

path.position(0.5)       # point halfway along the path's length
path.rotation_deg(0.5)   # heading at that point, for auto-rotation
```

Progress is parameterised by arc length, so equal steps in progress move an
equal distance along the path. `start_offset` and `end_offset` limit the
traversal to part of the path, and `rotation_offset` (in degrees) is added to
the heading.

### Splitting text

```python
from spanda.split_text import SplitText

split = SplitText("Hello world")
split.char_count()   # 11, spaces included
split.word_count()   # 2
[word.text for word in split.words()]   # ['Hello', 'world']
```

Each character carries its position in the text and the index of the word it
belongs to, ready for staggered per-character or per-word animation.

## What it does not do

- It ships no named easing curves; supply your own callables.
- It has no clock, frame driver or timeline to sequence animations; you call
  `update(dt)` on each object yourself.
- It has no springs, no smooth curve through a list of points, and no parser
  for SVG path strings; `CompoundPath` takes command objects.
- It does not render anything or touch a document; it only computes values.

## Running the tests

```
pip install -e ".[test]"
pytest
```