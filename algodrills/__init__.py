"""Classic interview and contest algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = ["arrays", "basics", "hashing", "orbitax", "searching", "strings", "structures"]