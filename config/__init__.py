"""Konfiguration: Pydantic-Schema, Standardwerte und YAML-Manager."""
