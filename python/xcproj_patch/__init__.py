"""Patch an Xcode project in place: build settings, capabilities, plists, frameworks."""

__version__ = "0.1.0"
