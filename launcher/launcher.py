#!/usr/bin/env python3
"""
Arma 3 Dedicated Server Preset Launcher
Picks a mod preset, syncs keys and starts the server.
"""

import sys
from preset_launcher.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:] or ["run"]))
