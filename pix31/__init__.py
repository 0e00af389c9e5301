"""pix31: scaffold pixelarticons icon components for React and React Native."""

__version__ = "1.0.0"
