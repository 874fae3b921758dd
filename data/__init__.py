"""Feste Beispieldaten für neue Sitzungen."""
