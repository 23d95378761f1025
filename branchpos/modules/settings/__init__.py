from .controller import SettingsController

__all__ = ["SettingsController"]
