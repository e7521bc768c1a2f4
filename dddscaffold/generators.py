"""Code generators behind the command line tool and their options."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InitOptions:
    project_name: str
    module_path: str = ""
    author: str = ""
    email: str = ""
    license: str = "MIT"
    template: str = "clean-architecture"
    skip_frontend: bool = False
    with_docker: bool = False
    with_k8s: bool = False


@dataclass
class EntityOptions:
    name: str
    fields: str = ""
    methods: str = ""
    package: str = ""
    with_vo: bool = False
    with_aggregate: bool = False


@dataclass
class RepositoryOptions:
    name: str
    domain: str = ""
    output_dir: str = ""


@dataclass
class ServiceOptions:
    name: str
    kind: str = "application"
    methods: str = ""
    dependencies: list[str] = field(default_factory=list)


@dataclass
class HandlerOptions:
    name: str
    kind: str = "command"
    domain: str = ""


@dataclass
class DTOOptions:
    name: str
    kind: str = "request"
    fields: str = ""
    with_validation: bool = True


def _report(lines: list[str]) -> str:
    """Print the report lines and return them as one text."""
    text = "\n".join(lines)
    print(text)
    return text


@dataclass
class InitGenerator:
    """Creates the layout of a new project."""

    opts: InitOptions

    def generate(self) -> str:
        """Report the project being initialised; return the report."""
        return _report(
            [
                f"Initializing project: {self.opts.project_name}",
                f"Module path: {self.opts.module_path}",
                f"Template: {self.opts.template}",
            ]
        )


@dataclass
class EntityGenerator:
    opts: EntityOptions

    def generate(self) -> str:
        """Report the entity being generated; return the report."""
        return _report([f"Generating entity: {self.opts.name}"])


@dataclass
class RepositoryGenerator:
    opts: RepositoryOptions

    def generate(self) -> str:
        """Report the repository being generated; return the report."""
        return _report([f"Generating repository: {self.opts.name}"])


@dataclass
class ServiceGenerator:
    opts: ServiceOptions

    def generate(self) -> str:
        """Report the service being generated; return the report."""
        return _report([f"Generating service: {self.opts.name}"])


@dataclass
class HandlerGenerator:
    opts: HandlerOptions

    def generate(self) -> str:
        """Report the handler being generated; return the report."""
        return _report([f"Generating handler: {self.opts.name}"])


@dataclass
class DTOGenerator:
    opts: DTOOptions

    def generate(self) -> str:
        """Report the DTO being generated; return the report."""
        return _report([f"Generating DTO: {self.opts.name}"])


def clean_generated_files(path: str, dry_run: bool) -> str:
    """Report the removal of generated files under a path; return the report."""
    flag = str(bool(dry_run)).lower()
    return _report([f"Cleaning generated files in {path} (dry-run: {flag})"])