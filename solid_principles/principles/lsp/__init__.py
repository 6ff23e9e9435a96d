"""LSP - Liskov Substitution Principle."""
