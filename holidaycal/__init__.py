"""Holiday rules and holiday definitions for Switzerland, France, the UK, Greece, Croatia, Ireland and Italy."""

__version__ = "2.0.0"

__all__ = ["holiday", "ch", "fr", "gb", "gr", "hr", "ie", "it"]