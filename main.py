#!/usr/bin/env python3
"""
Beastbound: Verdant Shards

Main entry point; a thin wrapper around the terminal front end in
beastbound.cli.

To run: python main.py
"""

from beastbound.cli import run

if __name__ == "__main__":
    run()
