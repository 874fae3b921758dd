"""Terminal-Oberfläche (rich): Tabellen und interaktive Sitzung."""
