# src/depviz/utils/log.py

"""Stdout logging helpers used by the CLI, loaders and exporters."""

from __future__ import annotations

from datetime import datetime, timezone


def log(msg: str) -> None:
    """Lightweight, timestamped logger (stdout)."""
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    print(f"[{ts}] {msg}")


def info(msg: str) -> None:
    print(f"[INFO] {msg}")


def warn(msg: str) -> None:
    print(f"[WARN] {msg}")
