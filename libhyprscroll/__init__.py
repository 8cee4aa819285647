"""Absolute column navigation for the hyprscrolling layout of Hyprland."""
