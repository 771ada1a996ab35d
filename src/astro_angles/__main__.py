#!/usr/bin/env python3
"""Entry point for astro-angles server."""

from astro_angles.server import run

if __name__ == "__main__":
    run()
