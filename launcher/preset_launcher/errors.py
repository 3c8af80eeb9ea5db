class LauncherError(Exception):
    """Base exception for preset_launcher."""


class ConfigError(LauncherError):
    """Launcher configuration is missing a field or points at nothing."""


class NoPresetsFound(LauncherError):
    """The presets directory holds no preset file."""


class InvalidPresetName(LauncherError):
    """A preset was requested by name but no preset file carries it."""


class BrokenSymlink(LauncherError):
    """A workshop mod folder exists but its link target is gone."""


class LaunchError(LauncherError):
    """The server executable could not be started."""


class NoLogFound(LauncherError):
    """No RPT log file exists in the profiles directory."""
