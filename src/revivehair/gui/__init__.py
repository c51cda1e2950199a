"""Flet GUI for ReviveHair."""
