"""Visual novel building blocks on pygame: scenes, layout, rendering, resources, audio, window and input."""

__version__ = "0.1.0"