"""Find, report and remove unused assets in Flutter projects."""

__version__ = "0.1.0"
