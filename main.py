#!/usr/bin/env python3
"""
Herramienta de backup de bases de datos
Punto de entrada principal

Uso:
    python main.py                        # Ejecutar backup una vez (config.json)
    python main.py --env                  # Configuración desde variables de entorno (.env)
    python main.py --method kubectl-exec  # Reemplazar el método configurado
    python main.py --db nombre_db         # Backup de una BD específica
    python main.py scheduler --now        # Modo scheduler (automático)
    python main.py --help                 # Ayuda
"""
import sys
import argparse
from pathlib import Path

# Agregar la raíz del proyecto al path
sys.path.insert(0, str(Path(__file__).parent))

from dbbackup.config import Config
from dbbackup.logger import LoggerService
from dbbackup.repositories.config_repository import ConfigRepository
from dbbackup.services.backup_service import BackupService
from dbbackup.services.report_service import ReportService
from dbbackup.services.scheduler_service import SchedulerService


ENV_EXAMPLE = """# Variables de entorno para la herramienta de backup
# Copia este archivo como .env y completa con tus credenciales

# Método: docker-run | docker-exec | kubectl-exec
BACKUP_METHOD=docker-run
BACKUP_TEMP_DIR=/tmp/db-backups
K8S_NAMESPACE=default

# PostgreSQL
PG_HOST=postgres
PG_USER=postgres
PG_PASS=tu_password_seguro
PG_DB=mydb
PG_VERSION=15
PG_CONTAINER=test-postgres
PG_POD=postgres-0

# MySQL
MYSQL_HOST=mysql
MYSQL_USER=root
MYSQL_PASS=otro_password
MYSQL_DB=mydb
MYSQL_VERSION=8
MYSQL_CONTAINER=test-mysql
MYSQL_POD=mysql-0

# MariaDB
MARIADB_HOST=mariadb
MARIADB_USER=root
MARIADB_PASS=password_mariadb
MARIADB_DB=mydb
MARIADB_VERSION=11
MARIADB_CONTAINER=test-mariadb
MARIADB_POD=mariadb-0

# MongoDB
MONGO_HOST=mongodb
MONGO_DB=mydb
MONGO_VERSION=7
MONGO_CONTAINER=test-mongodb
MONGO_POD=mongodb-0
"""


def parse_arguments(argv=None):
    """
    Parsea argumentos de línea de comandos

    Returns:
        Namespace con los argumentos parseados
    """
    parser = argparse.ArgumentParser(
        description='Backup de PostgreSQL, MySQL, MariaDB y MongoDB vía docker o kubectl',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos:
  python main.py                          # Backup único con config.json
  python main.py --env                    # Backup único con variables PG_*, MYSQL_*, ...
  python main.py --method docker-exec     # Forzar el método de ejecución
  python main.py --db mi_db               # Backup de una base específica
  python main.py scheduler --now          # Iniciar servicio automático
  python main.py --init                   # Crear archivos de configuración
        """
    )

    parser.add_argument(
        'mode',
        nargs='?',
        choices=['once', 'scheduler'],
        default='once',
        help='Modo de ejecución (default: once)'
    )

    parser.add_argument(
        '--env',
        action='store_true',
        help='Leer la configuración desde variables de entorno en lugar de config.json'
    )

    parser.add_argument(
        '--method',
        choices=Config.SUPPORTED_METHODS,
        help='Método de ejecución que reemplaza al configurado'
    )

    parser.add_argument(
        '--db',
        type=str,
        metavar='NOMBRE',
        help='Realizar backup de una base de datos específica'
    )

    parser.add_argument(
        '--init',
        action='store_true',
        help='Crear archivos de configuración de ejemplo'
    )

    parser.add_argument(
        '--now',
        action='store_true',
        help='Ejecutar backup inmediatamente al iniciar scheduler'
    )

    return parser.parse_args(argv)


def initialize_config():
    """
    Inicializa archivos de configuración si no existen

    Returns:
        True si se creó algún archivo
    """
    logger = LoggerService.get_logger("Init")
    config_repo = ConfigRepository()

    created_files = []

    if not Config.CONFIG_FILE.exists():
        if config_repo.create_example_config():
            created_files.append(str(Config.CONFIG_FILE))

    env_example = Config.BASE_DIR / ".env.example"
    if not env_example.exists():
        try:
            env_example.write_text(ENV_EXAMPLE, encoding='utf-8')
            created_files.append(str(env_example))
            logger.info(f"Creado: {env_example}")
        except OSError as e:
            logger.error(f"Error creando .env.example: {e}")

    if created_files:
        logger.info("=" * 70)
        logger.info("ARCHIVOS DE CONFIGURACIÓN CREADOS")
        logger.info("=" * 70)
        for file in created_files:
            logger.info(f"  - {file}")
        logger.info("")
        logger.info("IMPORTANTE:")
        logger.info("1. Copia .env.example como .env")
        logger.info("2. Edita .env con tus credenciales")
        logger.info("3. Edita config.json o usa --env para leer solo variables de entorno")
        logger.info("=" * 70)
        return True

    return False


def main(argv=None):
    """Función principal"""
    args = parse_arguments(argv)
    logger = LoggerService.get_logger("Main")

    if args.init:
        initialize_config()
        return 0

    config_repo = ConfigRepository()
    if args.env:
        config_repo.load_from_environment()
    elif not Config.CONFIG_FILE.exists():
        logger.error(f"No se encontró {Config.CONFIG_FILE}")
        logger.error("Ejecuta: python main.py --init, o usa --env")
        return 1

    backup_service = BackupService()
    report_service = ReportService()

    def build_jobs():
        return config_repo.build_jobs(method=args.method, only=args.db)

    if args.mode == 'scheduler':
        scheduler = SchedulerService(
            backup_service,
            job_factory=build_jobs,
            schedules=config_repo.get_backup_settings().schedule,
            report_service=report_service,
        )
        scheduler.start(run_immediately=args.now)
        return 0

    jobs = build_jobs()
    if not jobs:
        if args.db:
            logger.error(f"Base de datos no encontrada en configuración: {args.db}")
        else:
            logger.error("No hay bases de datos para respaldar")
        return 1

    report_service.print_config_summary(jobs)
    outcomes = backup_service.run(jobs)
    counts = report_service.print_summary(outcomes)

    # Exit code basado en resultados
    return 1 if counts['failed'] > 0 else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nPrograma interrumpido por el usuario")
        sys.exit(0)
