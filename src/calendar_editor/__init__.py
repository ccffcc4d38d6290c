"""Calendar Editor - undo/redo история для редактирования событий календаря."""

__version__ = "1.0.0"
