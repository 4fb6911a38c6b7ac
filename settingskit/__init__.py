"""Setting records with change signals, listeners, value equality rules and saving with rotating backups."""

__version__ = "0.1.0"
__all__ = ["backup", "equal", "listener", "options", "paths", "settingdata"]