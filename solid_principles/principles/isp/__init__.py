"""ISP - Interface Segregation Principle."""
