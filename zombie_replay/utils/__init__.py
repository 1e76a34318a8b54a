"""Image helpers (NumPy + Pillow) used by the renderer's compositing steps."""
