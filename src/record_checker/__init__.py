"""Line-delimited JSON record checker with a severity-routed audit log."""

from __future__ import annotations

__version__ = "0.1.0"
