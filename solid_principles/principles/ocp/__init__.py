"""OCP - Open/Closed Principle."""
