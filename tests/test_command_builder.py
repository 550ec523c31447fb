"""
Tests para la construcción de comandos de volcado
"""
import unittest
from pathlib import Path
import sys

# Agregar la raíz del proyecto al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dbbackup.builders.command_builder import (
    build_dump_command,
    build_plan,
    container_image,
)
from dbbackup.exceptions import ConfigurationError
from dbbackup.models import (
    ConnectionSpec,
    DumpCommand,
    MountedDumpPlan,
    SingleCommandPlan,
    StagedDumpPlan,
)


class TestBuildDumpCommand(unittest.TestCase):
    """Tests para build_dump_command"""

    def setUp(self):
        self.pg = ConnectionSpec(host="postgres", database="mydb", user="pguser", password="pw",
                                 container="test-postgres", pod="postgres-0")
        self.mysql = ConnectionSpec(host="mysql", database="shop", user="root", password="secret")

    def test_postgres_docker_run(self):
        """Test pg_dump contra el host configurado"""
        command = build_dump_command("postgres", "docker-run", self.pg)
        self.assertEqual(command.argv, ("pg_dump", "-h", "postgres", "-U", "pguser", "mydb"))
        self.assertEqual(command.secrets, {"PGPASSWORD": "pw"})

    def test_exec_methods_use_localhost(self):
        """Test que docker-exec y kubectl-exec conectan a localhost"""
        for method in ("docker-exec", "kubectl-exec"):
            command = build_dump_command("postgres", method, self.pg)
            self.assertEqual(command.argv[2], "localhost")

    def test_mysql_and_mariadb_share_client(self):
        """Test mysqldump para MySQL y MariaDB"""
        for db_type in ("mysql", "mariadb"):
            command = build_dump_command(db_type, "docker-run", self.mysql)
            self.assertEqual(command.argv, ("mysqldump", "-h", "mysql", "-u", "root", "shop"))
            self.assertEqual(command.secrets, {"MYSQL_PWD": "secret"})

    def test_password_never_in_argv(self):
        """Test que la contraseña no aparece en el argv"""
        for db_type in ("postgres", "mysql", "mariadb"):
            for method in ("docker-run", "docker-exec", "kubectl-exec"):
                command = build_dump_command(db_type, method, self.mysql)
                self.assertNotIn("secret", " ".join(command.argv))

    def test_password_not_in_repr(self):
        """Test que repr del comando oculta los secretos"""
        command = build_dump_command("mysql", "docker-run", self.mysql)
        self.assertNotIn("secret", repr(command))

    def test_mongodump_requires_output_dir(self):
        """Test mongodump sin directorio de salida"""
        mongo = ConnectionSpec(host="mongodb", database="events")
        with self.assertRaises(ConfigurationError):
            build_dump_command("mongodb", "docker-run", mongo)

    def test_unknown_type(self):
        """Test tipo desconocido"""
        with self.assertRaises(ConfigurationError) as ctx:
            build_dump_command("oracle", "docker-run", self.pg)
        self.assertIn("oracle", str(ctx.exception))


class TestBuildPlan(unittest.TestCase):
    """Tests para build_plan"""

    def setUp(self):
        self.type_dir = Path("backup") / "mongodb"
        self.destination = self.type_dir / "2024-01-15_10-30-00"
        self.mongo = ConnectionSpec(host="mongodb", database="events", user="ignored",
                                    password="ignored-too", container="test-mongodb", pod="mongodb-0")

    def test_file_plan(self):
        """Test plan de un solo comando para PostgreSQL"""
        destination = Path("backup/postgres/mydb_2024-01-15_10-30-00.sql")
        pg = ConnectionSpec(host="postgres", database="mydb", user="postgres", container="c")
        plan = build_plan("postgres", "docker-exec", pg, destination)
        self.assertIsInstance(plan, SingleCommandPlan)
        self.assertEqual(plan.destination, destination)
        self.assertEqual(plan.command.argv[0], "pg_dump")

    def test_mongodb_docker_run_writes_into_mount(self):
        """Test mongodump escribe en el volumen montado"""
        plan = build_plan("mongodb", "docker-run", self.mongo, self.destination)
        self.assertIsInstance(plan, MountedDumpPlan)
        self.assertEqual(
            plan.command.argv,
            ("mongodump", "--host", "mongodb", "--db", "events", "--out", "/backup/2024-01-15_10-30-00"),
        )
        self.assertEqual(plan.command.secrets, {})

    def test_mongodb_exec_is_staged(self):
        """Test plan en tres fases para docker-exec y kubectl-exec"""
        for method in ("docker-exec", "kubectl-exec"):
            plan = build_plan("mongodb", method, self.mongo, self.destination, temp_dir="/tmp/db-backups")
            self.assertIsInstance(plan, StagedDumpPlan)
            self.assertEqual(
                plan.create.argv,
                ("mongodump", "--host", "localhost", "--db", "events",
                 "--out", "/tmp/db-backups/2024-01-15_10-30-00"),
            )
            self.assertEqual(plan.remote_artifact, "/tmp/db-backups/2024-01-15_10-30-00/events")
            self.assertEqual(plan.remote_dir, "/tmp/db-backups/2024-01-15_10-30-00")
            self.assertEqual(plan.cleanup, DumpCommand(argv=("rm", "-rf", "/tmp/db-backups/2024-01-15_10-30-00")))

    def test_mongodb_ignores_credentials(self):
        """Test que mongodump no recibe usuario ni contraseña"""
        plan = build_plan("mongodb", "docker-exec", self.mongo, self.destination)
        self.assertNotIn("ignored", " ".join(plan.create.argv))

    def test_custom_temp_dir(self):
        """Test directorio temporal remoto configurable"""
        plan = build_plan("mongodb", "kubectl-exec", self.mongo, self.destination, temp_dir="/var/tmp/dumps")
        self.assertEqual(plan.remote_dir, "/var/tmp/dumps/2024-01-15_10-30-00")

    def test_missing_container(self):
        """Test docker-exec sin contenedor"""
        spec = ConnectionSpec(host="mysql", database="shop")
        with self.assertRaises(ConfigurationError) as ctx:
            build_plan("mysql", "docker-exec", spec, Path("backup/mysql/shop.sql"))
        self.assertEqual(str(ctx.exception), "container name is required for docker-exec")

    def test_docker_run_needs_no_target(self):
        """Test que docker-run ignora contenedor y pod"""
        spec = ConnectionSpec(host="mysql", database="shop")
        plan = build_plan("mysql", "docker-run", spec, Path("backup/mysql/shop.sql"))
        self.assertIsInstance(plan, SingleCommandPlan)

    def test_target_of_unused_method_is_ignored(self):
        """Test que solo se valida el destino del método elegido"""
        spec = ConnectionSpec(host="mysql", database="shop", pod="mysql-0")
        plan = build_plan("mysql", "kubectl-exec", spec, Path("backup/mysql/shop.sql"))
        self.assertIsInstance(plan, SingleCommandPlan)

    def test_missing_pod(self):
        """Test kubectl-exec sin pod"""
        spec = ConnectionSpec(host="mysql", database="shop", container="c")
        with self.assertRaises(ConfigurationError) as ctx:
            build_plan("mysql", "kubectl-exec", spec, Path("backup/mysql/shop.sql"))
        self.assertEqual(str(ctx.exception), "pod name is required for kubectl-exec")

    def test_unknown_method(self):
        """Test método desconocido"""
        with self.assertRaises(ConfigurationError):
            build_plan("mysql", "ssh", self.mongo, Path("backup/mysql/shop.sql"))


class TestContainerImage(unittest.TestCase):
    """Tests para container_image"""

    def test_default_versions(self):
        """Test tags por defecto"""
        self.assertEqual(container_image("postgres"), "postgres:15")
        self.assertEqual(container_image("mysql"), "mysql:8")
        self.assertEqual(container_image("mariadb"), "mariadb:11")
        self.assertEqual(container_image("mongodb"), "mongo:7")

    def test_explicit_version(self):
        """Test versión configurada"""
        self.assertEqual(container_image("postgres", "16"), "postgres:16")


if __name__ == '__main__':
    unittest.main(verbosity=2)
