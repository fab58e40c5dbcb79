#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Usage:
    python run.py play [--player-one NAME] [--player-two NAME] [--loser-starts]
    python run.py serve [--host HOST] [--port PORT]
    python run.py benchmark [--iterations N]
"""

import sys

from connect4.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
