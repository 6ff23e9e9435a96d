"""DIP - Dependency Inversion Principle."""
