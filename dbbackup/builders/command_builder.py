"""
Construcción pura de comandos de volcado

Dado (tipo, método, conexión, destino) devuelve el plan de comandos a ejecutar.
No lanza procesos ni toca el sistema de archivos.
"""
import posixpath
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from ..config import Config
from ..exceptions import ConfigurationError
from ..models import (
    CommandPlan,
    ConnectionSpec,
    DatabaseType,
    DumpCommand,
    ExecutionMethod,
    MountedDumpPlan,
    SingleCommandPlan,
    StagedDumpPlan,
)

# Punto de montaje del directorio local dentro del contenedor efímero
MOUNT_TARGET = "/backup"

_IMAGES = {
    DatabaseType.POSTGRES: "postgres",
    DatabaseType.MYSQL: "mysql",
    DatabaseType.MARIADB: "mariadb",
    DatabaseType.MONGODB: "mongo",
}

_TARGET_LABELS = {
    ExecutionMethod.DOCKER_EXEC: "container",
    ExecutionMethod.KUBECTL_EXEC: "pod",
}


def _postgres_dump(host: str, connection: ConnectionSpec, output_dir: Optional[str]) -> DumpCommand:
    return DumpCommand(
        argv=("pg_dump", "-h", host, "-U", connection.user, connection.database),
        secrets={"PGPASSWORD": connection.password},
    )


def _mysql_dump(host: str, connection: ConnectionSpec, output_dir: Optional[str]) -> DumpCommand:
    # MariaDB usa el mismo cliente y la misma variable de contraseña
    return DumpCommand(
        argv=("mysqldump", "-h", host, "-u", connection.user, connection.database),
        secrets={"MYSQL_PWD": connection.password},
    )


def _mongo_dump(host: str, connection: ConnectionSpec, output_dir: Optional[str]) -> DumpCommand:
    if not output_dir:
        raise ConfigurationError("mongodump requires an output directory")
    return DumpCommand(
        argv=("mongodump", "--host", host, "--db", connection.database, "--out", output_dir),
    )


_DUMP_BUILDERS: Dict[DatabaseType, Callable[[str, ConnectionSpec, Optional[str]], DumpCommand]] = {
    DatabaseType.POSTGRES: _postgres_dump,
    DatabaseType.MYSQL: _mysql_dump,
    DatabaseType.MARIADB: _mysql_dump,
    DatabaseType.MONGODB: _mongo_dump,
}


def build_dump_command(
    database_type: Union[DatabaseType, str],
    method: Union[ExecutionMethod, str],
    connection: ConnectionSpec,
    output_dir: Optional[str] = None,
) -> DumpCommand:
    """
    Construye el comando de la utilidad de volcado del motor

    Args:
        database_type: Tipo de base de datos
        method: Método de ejecución
        connection: Parámetros de conexión
        output_dir: Directorio de salida (solo mongodump)

    Returns:
        Comando con argv y secretos separados

    Raises:
        ConfigurationError: tipo o método desconocido
    """
    database_type = DatabaseType.parse(database_type)
    method = ExecutionMethod.parse(method)

    # Dentro del contenedor o pod el motor escucha en localhost
    host = connection.host if method is ExecutionMethod.DOCKER_RUN else "localhost"
    return _DUMP_BUILDERS[database_type](host, connection, output_dir)


def build_plan(
    database_type: Union[DatabaseType, str],
    method: Union[ExecutionMethod, str],
    connection: ConnectionSpec,
    destination: Path,
    temp_dir: str = Config.BACKUP_TEMP_DIR,
) -> CommandPlan:
    """
    Construye el plan completo para un trabajo

    Args:
        database_type: Tipo de base de datos
        method: Método de ejecución
        connection: Parámetros de conexión
        destination: Archivo (.sql) o directorio (mongodb) local de destino
        temp_dir: Directorio temporal remoto para backups en directorio

    Returns:
        SingleCommandPlan, MountedDumpPlan o StagedDumpPlan

    Raises:
        ConfigurationError: tipo o método desconocido, o destino sin identificar
    """
    database_type = DatabaseType.parse(database_type)
    method = ExecutionMethod.parse(method)
    validate_target(method, connection)

    if not database_type.produces_directory:
        return SingleCommandPlan(
            destination=destination,
            command=build_dump_command(database_type, method, connection),
        )

    # El nombre del directorio destino es el timestamp del lote
    stamp = destination.name

    if method is ExecutionMethod.DOCKER_RUN:
        return MountedDumpPlan(
            destination=destination,
            command=build_dump_command(
                database_type, method, connection, posixpath.join(MOUNT_TARGET, stamp)
            ),
        )

    remote_dir = posixpath.join(temp_dir, stamp)
    return StagedDumpPlan(
        destination=destination,
        create=build_dump_command(database_type, method, connection, remote_dir),
        remote_artifact=posixpath.join(remote_dir, connection.database),
        remote_dir=remote_dir,
        cleanup=DumpCommand(argv=("rm", "-rf", remote_dir)),
    )


def validate_target(method: ExecutionMethod, connection: ConnectionSpec) -> None:
    """Verifica que el contenedor o pod del método esté definido"""
    label = _TARGET_LABELS.get(method)
    if label and not connection.target_for(method):
        raise ConfigurationError(f"{label} name is required for {method.value}")


def container_image(database_type: Union[DatabaseType, str], version: str = "") -> str:
    """
    Imagen para el contenedor efímero, p. ej. 'postgres:15'

    Args:
        database_type: Tipo de base de datos
        version: Tag de versión; vacío usa el tag por defecto del motor
    """
    database_type = DatabaseType.parse(database_type)
    tag = version or Config.DEFAULT_VERSIONS[database_type.value]
    return f"{_IMAGES[database_type]}:{tag}"
