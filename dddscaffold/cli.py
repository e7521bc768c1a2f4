"""Command line interface of the DDD scaffold tool."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Optional, Sequence

from .generators import (
    DTOGenerator,
    DTOOptions,
    EntityGenerator,
    EntityOptions,
    HandlerGenerator,
    HandlerOptions,
    InitGenerator,
    InitOptions,
    RepositoryGenerator,
    RepositoryOptions,
    ServiceGenerator,
    ServiceOptions,
    clean_generated_files,
)

PROGRAM = "go-ddd-scaffold"
VERSION = "1.0.0"
COMMIT = "dev"
BUILD_DATE = "unknown"

_DESCRIPTION = """A CLI tool for generating DDD scaffold code following best practices.

Features:
  - Project initialization with Clean Architecture
  - Code generation (entities, repositories, DAOs, services)
  - Database migration management
  - Documentation generation
  - Custom template support"""

_TASK_MESSAGES = {
    "migrate up": "Running migrations...",
    "migrate down": "Rolling back migration...",
    "docs swagger": "Generating Swagger docs...",
}

Handler = Callable[[argparse.Namespace], Optional[str]]


class _UsageError(Exception):
    """The command line could not be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


class _VersionAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        print(f"Version: {VERSION}\nCommit: {COMMIT}\nBuilt: {BUILD_DATE}")
        parser.exit()


class _ExtendCommaList(argparse.Action):
    """Collect comma separated values, the option may be repeated."""

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        current = list(getattr(namespace, self.dest) or [])
        current.extend(part for part in str(values).split(",") if part)
        setattr(namespace, self.dest, current)


def get_current_user() -> str:
    """Return the user name used in default module paths."""
    return "username"


def _show_help(parser: argparse.ArgumentParser) -> Handler:
    def run(_args: argparse.Namespace) -> str:
        return parser.format_help()

    return run


def _run_init(args: argparse.Namespace) -> None:
    module_path = args.module_path
    if module_path is None:
        module_path = f"github.com/{get_current_user()}/{args.project_name}"
    opts = InitOptions(
        project_name=args.project_name,
        module_path=module_path,
        author=args.author,
        email=args.email,
        license=args.license,
        template=args.template,
        skip_frontend=args.skip_frontend,
        with_docker=args.with_docker,
        with_k8s=args.with_k8s,
    )
    InitGenerator(opts).generate()


def _run_entity(args: argparse.Namespace) -> None:
    opts = EntityOptions(
        name=args.name,
        fields=args.fields,
        methods=args.methods,
        package=args.package,
        with_vo=args.with_vo,
        with_aggregate=args.with_aggregate,
    )
    EntityGenerator(opts).generate()


def _run_repository(args: argparse.Namespace) -> None:
    opts = RepositoryOptions(name=args.name, domain=args.domain, output_dir=args.output)
    RepositoryGenerator(opts).generate()


def _run_service(args: argparse.Namespace) -> None:
    opts = ServiceOptions(
        name=args.name,
        kind=args.type,
        methods=args.methods,
        dependencies=list(args.deps),
    )
    ServiceGenerator(opts).generate()


def _run_handler(args: argparse.Namespace) -> None:
    opts = HandlerOptions(name=args.name, kind=args.type, domain=args.domain)
    HandlerGenerator(opts).generate()


def _run_dto(args: argparse.Namespace) -> None:
    opts = DTOOptions(
        name=args.name,
        kind=args.type,
        fields=args.fields,
        with_validation=args.with_validation,
    )
    DTOGenerator(opts).generate()


def _run_clean(args: argparse.Namespace) -> None:
    clean_generated_files(args.path, args.dry_run)


def _run_version(args: argparse.Namespace) -> str:
    return f"{PROGRAM} version {args.root_version}\n"


def _run_task(args: argparse.Namespace) -> str:
    """Return the message of a migration or documentation task."""
    if args.task == "migrate create":
        return f"Creating migration: {args.name}\n"
    return _TASK_MESSAGES[args.task] + "\n"


def _add_init(commands: Any) -> None:
    p = commands.add_parser(
        "init",
        help="Initialize a new DDD project",
        description="Create a new DDD project with standard Clean Architecture structure",
    )
    p.add_argument("project_name")
    p.add_argument("-m", "--module-path", default=None, help="Go module path")
    p.add_argument("-a", "--author", default="", help="Author name")
    p.add_argument("-e", "--email", default="", help="Author email")
    p.add_argument("-l", "--license", default="MIT", help="License type")
    p.add_argument("-t", "--template", default="clean-architecture", help="Project template")
    p.add_argument("--skip-frontend", action="store_true", help="Skip frontend initialization")
    p.add_argument("--with-docker", action="store_true", help="Include Docker configuration")
    p.add_argument("--with-k8s", action="store_true", help="Include Kubernetes manifests")
    p.set_defaults(handler=_run_init)


def _add_generate(commands: Any) -> None:
    gen = commands.add_parser(
        "generate",
        aliases=["gen", "g"],
        help="Generate code for DDD scaffold",
        description="Generate various types of code following DDD and Clean Architecture patterns",
    )
    gen.set_defaults(handler=_show_help(gen))
    kinds = gen.add_subparsers(title="commands", metavar="COMMAND")

    entity = kinds.add_parser(
        "entity",
        help="Generate domain entity",
        description="Generate domain entity with value objects and aggregate root",
    )
    entity.add_argument("name")
    entity.add_argument("-f", "--fields", default="", help="Field definitions (format: name:type,name:type)")
    entity.add_argument("-m", "--methods", default="", help="Business methods to generate")
    entity.add_argument("-p", "--package", default="", help="Domain package name")
    entity.add_argument("--with-vo", action="store_true", help="Generate value objects")
    entity.add_argument("--with-aggregate", action="store_true", help="Generate aggregate root")
    entity.set_defaults(handler=_run_entity)

    repo = kinds.add_parser(
        "repository",
        help="Generate repository layer",
        description="Generate repository implementation that uses DAO",
    )
    repo.add_argument("name")
    repo.add_argument("-d", "--domain", default="", help="Domain name")
    repo.add_argument("-o", "--output", default="", help="Output directory")
    repo.set_defaults(handler=_run_repository)

    service = kinds.add_parser(
        "service",
        help="Generate application service",
        description="Generate application service with CQRS pattern",
    )
    service.add_argument("name")
    service.add_argument("-t", "--type", default="application", help="Service type (application/domain)")
    service.add_argument("-m", "--methods", default="", help="Service methods")
    service.add_argument(
        "-d", "--deps", action=_ExtendCommaList, default=[], help="Service dependencies"
    )
    service.set_defaults(handler=_run_service)

    handler = kinds.add_parser(
        "handler",
        help="Generate command/query handler",
        description="Generate CQRS command or query handler",
    )
    handler.add_argument("name")
    handler.add_argument("-t", "--type", default="command", help="Handler type (command/query)")
    handler.add_argument("-d", "--domain", default="", help="Domain name")
    handler.set_defaults(handler=_run_handler)

    dto = kinds.add_parser(
        "dto",
        help="Generate DTO (Data Transfer Object)",
        description="Generate DTO for API layer",
    )
    dto.add_argument("name")
    dto.add_argument("-t", "--type", default="request", help="DTO type (request/response)")
    dto.add_argument("-f", "--fields", default="", help="Field definitions")
    dto.add_argument(
        "--with-validation",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Add validation tags",
    )
    dto.set_defaults(handler=_run_dto)


def _add_migrate(commands: Any) -> None:
    migrate = commands.add_parser(
        "migrate", help="Database migration commands", description="Manage database migrations"
    )
    migrate.set_defaults(handler=_show_help(migrate))
    steps = migrate.add_subparsers(title="commands", metavar="COMMAND")

    up = steps.add_parser("up", help="Run all pending migrations")
    up.set_defaults(handler=_run_task, task="migrate up")

    down = steps.add_parser("down", help="Rollback last migration")
    down.set_defaults(handler=_run_task, task="migrate down")

    create = steps.add_parser("create", help="Create a new migration")
    create.add_argument("name")
    create.set_defaults(handler=_run_task, task="migrate create")


def _add_docs(commands: Any) -> None:
    docs = commands.add_parser(
        "docs", help="Generate documentation", description="Generate API and project documentation"
    )
    docs.set_defaults(handler=_show_help(docs))
    kinds = docs.add_subparsers(title="commands", metavar="COMMAND")
    swagger = kinds.add_parser("swagger", help="Generate Swagger documentation")
    swagger.set_defaults(handler=_run_task, task="docs swagger")


def _add_clean(commands: Any) -> None:
    clean = commands.add_parser(
        "clean",
        help="Clean generated files",
        description="Remove generated code files from the project",
    )
    clean.add_argument("path", nargs="?", default=".")
    clean.add_argument("--dry-run", action="store_true", help="Show what would be deleted")
    clean.set_defaults(handler=_run_clean)


def _add_version(commands: Any) -> None:
    version = commands.add_parser("version", help="Print the version number")
    version.set_defaults(handler=_run_version, to_stderr=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the parser of the whole command tree."""
    parser = _Parser(
        prog=PROGRAM,
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action=_VersionAction, help="Print version information")
    parser.add_argument(
        "-c", "--config", default="",
        help="Config file path (default is $HOME/.go-ddd-scaffold.yaml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "-n", "--dry-run", dest="global_dry_run", action="store_true",
        help="Show what would be done without actually doing it",
    )
    parser.set_defaults(handler=_show_help(parser), root_version=VERSION)

    commands = parser.add_subparsers(title="commands", metavar="COMMAND")
    _add_init(commands)
    _add_generate(commands)
    _add_migrate(commands)
    _add_docs(commands)
    _add_clean(commands)
    _add_version(commands)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool; return the process exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        output = args.handler(args)
    except _UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    except SystemExit as exc:
        code = exc.code
        if code is None:
            return 0
        return code if isinstance(code, int) else 1
    if output is not None:
        stream = sys.stderr if getattr(args, "to_stderr", False) else sys.stdout
        stream.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())