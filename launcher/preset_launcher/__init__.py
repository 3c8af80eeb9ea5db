"""
preset_launcher package
-----------------------
Arma 3 dedicated server launcher driven by mod preset files.
Contains modules for configuration, preset parsing, mod path resolution,
key synchronization, server process start and RPT log viewing.
"""

__version__ = "0.1.0"
