"""
bugcount: count findings in FindBugs-style XML bug collections without
loading the whole collection into memory.
"""

__version__ = "0.3.0"
