"""jesus-menu — open the Jesus College dining hall menus from the terminal."""

__version__ = "0.1.0"
