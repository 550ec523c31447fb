"""
Excepciones de la herramienta de backup

Cada clase corresponde a una etapa del trabajo; el orquestador las convierte
en el detalle de error del resultado y nunca aborta el lote.
"""


class BackupError(Exception):
    """Error base de todas las operaciones de backup"""


class ConfigurationError(BackupError):
    """Tipo de base de datos, método, destino o credencial inválidos"""


class DirectoryPreparationError(BackupError):
    """No se pudo preparar el directorio local de backups"""


class RemoteExecutionError(BackupError):
    """El comando de volcado terminó con error o no pudo invocarse"""


class ArtifactWriteError(BackupError):
    """No se pudo escribir el volcado en el archivo local"""


class CopyError(BackupError):
    """Falló la extracción del artefacto desde el contenedor o pod"""


class MeasurementError(BackupError):
    """El artefacto existe pero no se pudo obtener su tamaño"""
