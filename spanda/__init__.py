"""Animation primitives: Bezier and motion paths, keyframe tracks, shape morphing, inertia and text splitting."""

__version__ = "0.8.0"