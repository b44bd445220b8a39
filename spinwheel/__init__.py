"""SpinWheel - an animated, segmented color wheel."""

__version__ = "0.1.0"
