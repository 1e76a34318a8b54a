"""Rendering subpackage.

Turns a stream of immutable entity snapshots into an animated raster scene.
The renderer focuses on:

* Rebuilding a flat list of drawable items per simulation tick (no diffing).
* A closed set of effects (fade, slide, frame cycling, mirroring, hue shift)
  evaluated against wall-clock time on every paint pass.
* A self-rescheduling draw loop that only keeps running while a slide or
  frame cycle is still in progress.
* Lightweight Pillow + NumPy compositing suitable for small tile boards.

See :mod:`zombie_replay.renderer.animation` for the renderer itself and
:mod:`zombie_replay.renderer.canvas` for the drawing surface.
"""
