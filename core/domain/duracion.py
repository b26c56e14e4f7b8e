def calcular_duracion(time: str) -> int:
    """
    Convierte una hora "H:mm" / "HH:mm" en minutos desde las 00:00.

    No valida el formato: se asume que `time` ya pasó por la capa de validación.
    """
    horas, minutos = time.split(":")
    return int(horas) * 60 + int(minutos)
