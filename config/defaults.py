from config.schema import AppConfig, CloneDefaults, LogLevel


def default_app_config() -> AppConfig:
    """Standard-Konfiguration: Beispieldaten an, Datumsformat dd/MM/yyyy.

    Die Klon-Vorgaben entsprechen dem zweiten Semester 2025
    (01/08/2025 – 15/12/2025).
    """
    return AppConfig(
        institution_name="Universidad",
        load_sample_data=True,
        date_format="%d/%m/%Y",
        log_level=LogLevel.WARNING,
        clone_defaults=CloneDefaults(start_date="01/08/2025", end_date="15/12/2025"),
    )
