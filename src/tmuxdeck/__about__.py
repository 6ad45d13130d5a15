"""Metadata package for tmuxdeck."""

from __future__ import annotations

__title__ = "tmuxdeck"
__package_name__ = "tmuxdeck"
__version__ = "0.1.0"
__description__ = "Typed query and command layer over a running tmux server"
__author__ = "tmuxdeck contributors"
__license__ = "MIT"
__copyright__ = "Copyright 2026- tmuxdeck contributors"
