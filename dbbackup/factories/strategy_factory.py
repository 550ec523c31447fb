"""
Factory para crear estrategias de backup
"""
from typing import List, Tuple, Union
from ..models import DatabaseType, ExecutionMethod
from ..process_runner import ProcessRunner
from ..strategies.base_strategy import BackupStrategy
from ..strategies.file_dump_strategy import FileDumpStrategy
from ..strategies.mounted_directory_strategy import MountedDirectoryStrategy
from ..strategies.staged_directory_strategy import StagedDirectoryStrategy


class BackupStrategyFactory:
    """Factory para crear estrategias de backup (Factory Pattern)"""
    
    # Matriz completa (tipo, método) -> estrategia
    _strategies = {
        (DatabaseType.POSTGRES, ExecutionMethod.DOCKER_RUN): FileDumpStrategy,
        (DatabaseType.POSTGRES, ExecutionMethod.DOCKER_EXEC): FileDumpStrategy,
        (DatabaseType.POSTGRES, ExecutionMethod.KUBECTL_EXEC): FileDumpStrategy,
        (DatabaseType.MYSQL, ExecutionMethod.DOCKER_RUN): FileDumpStrategy,
        (DatabaseType.MYSQL, ExecutionMethod.DOCKER_EXEC): FileDumpStrategy,
        (DatabaseType.MYSQL, ExecutionMethod.KUBECTL_EXEC): FileDumpStrategy,
        (DatabaseType.MARIADB, ExecutionMethod.DOCKER_RUN): FileDumpStrategy,
        (DatabaseType.MARIADB, ExecutionMethod.DOCKER_EXEC): FileDumpStrategy,
        (DatabaseType.MARIADB, ExecutionMethod.KUBECTL_EXEC): FileDumpStrategy,
        (DatabaseType.MONGODB, ExecutionMethod.DOCKER_RUN): MountedDirectoryStrategy,
        (DatabaseType.MONGODB, ExecutionMethod.DOCKER_EXEC): StagedDirectoryStrategy,
        (DatabaseType.MONGODB, ExecutionMethod.KUBECTL_EXEC): StagedDirectoryStrategy,
    }
    
    @classmethod
    def create(
        cls,
        db_type: Union[DatabaseType, str],
        method: Union[ExecutionMethod, str],
        runner: ProcessRunner,
    ) -> BackupStrategy:
        """
        Crea la estrategia para un par (tipo de base de datos, método)
        
        Args:
            db_type: Tipo de base de datos (postgres, mysql, mariadb, mongodb)
            method: Método de ejecución (docker-run, docker-exec, kubectl-exec)
            runner: Runner de procesos que usará la estrategia
            
        Returns:
            Instancia de BackupStrategy
        
        Raises:
            ConfigurationError: si el tipo o el método no son soportados
        """
        key = (DatabaseType.parse(db_type), ExecutionMethod.parse(method))
        return cls._strategies[key](runner)
    
    @classmethod
    def get_supported_pairs(cls) -> List[Tuple[DatabaseType, ExecutionMethod]]:
        """
        Obtiene la lista de combinaciones soportadas
        
        Returns:
            Lista de pares (tipo, método)
        """
        return list(cls._strategies.keys())
