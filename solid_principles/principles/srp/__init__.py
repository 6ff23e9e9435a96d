"""SRP - Single Responsibility Principle."""
