import pytest

from dddscaffold.cli import build_parser, get_current_user, main


def test_version_flag_prints_template(capsys):
    assert main(["--version"]) == 0
    out = capsys.readouterr().out
    assert out == "Version: 1.0.0\nCommit: dev\nBuilt: unknown\n"


def test_version_command(capsys):
    assert main(["version"]) == 0
    err = capsys.readouterr().err
    assert err.strip() == "go-ddd-scaffold version 1.0.0"


def test_get_current_user():
    assert get_current_user() == "username"


def test_init_default_module_path(capsys):
    assert main(["init", "demo"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Initializing project: demo"
    assert out[1] == f"Module path: github.com/{get_current_user()}/demo"
    assert out[2] == "Template: clean-architecture"


def test_init_explicit_module_path(capsys):
    assert main(["init", "demo", "-m", "example.com/demo", "-t", "hexagonal"]) == 0
    out = capsys.readouterr().out
    assert "Module path: example.com/demo" in out
    assert "Template: hexagonal" in out


def test_init_requires_project_name(capsys):
    assert main(["init"]) == 1
    assert capsys.readouterr().err.strip()


@pytest.mark.parametrize("alias", ["generate", "gen", "g"])
def test_generate_entity_aliases(alias, capsys):
    assert main([alias, "entity", "Order"]) == 0
    assert capsys.readouterr().out.strip() == "Generating entity: Order"


@pytest.mark.parametrize(
    "kind,label",
    [
        ("repository", "repository"),
        ("service", "service"),
        ("handler", "handler"),
        ("dto", "DTO"),
    ],
)
def test_generate_kinds(kind, label, capsys):
    assert main(["generate", kind, "Order"]) == 0
    assert capsys.readouterr().out.strip() == f"Generating {label}: Order"


def test_service_defaults_and_deps():
    args = build_parser().parse_args(["generate", "service", "Billing", "-d", "repo,cache", "-d", "bus"])
    assert args.type == "application"
    assert args.deps == ["repo", "cache", "bus"]


def test_handler_and_dto_defaults():
    parser = build_parser()
    handler = parser.parse_args(["g", "handler", "Pay"])
    assert handler.type == "command"
    dto = parser.parse_args(["g", "dto", "Pay"])
    assert dto.type == "request"
    assert dto.with_validation is True
    off = parser.parse_args(["g", "dto", "Pay", "--no-with-validation"])
    assert off.with_validation is False


def test_clean_default_path(capsys):
    assert main(["clean"]) == 0
    assert capsys.readouterr().out.strip() == "Cleaning generated files in . (dry-run: false)"


def test_clean_dry_run(capsys):
    assert main(["clean", "build", "--dry-run"]) == 0
    assert capsys.readouterr().out.strip() == "Cleaning generated files in build (dry-run: true)"


def test_clean_too_many_args(capsys):
    assert main(["clean", "a", "b"]) == 1
    assert capsys.readouterr().err.strip()


def test_migrate_commands(capsys):
    assert main(["migrate", "up"]) == 0
    assert main(["migrate", "down"]) == 0
    assert main(["migrate", "create", "add_users"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Running migrations...",
        "Rolling back migration...",
        "Creating migration: add_users",
    ]


def test_docs_swagger(capsys):
    assert main(["docs", "swagger"]) == 0
    assert capsys.readouterr().out.strip() == "Generating Swagger docs..."


def test_parent_command_prints_help(capsys):
    assert main(["migrate"]) == 0
    out = capsys.readouterr().out
    assert "up" in out and "create" in out


def test_unknown_command_fails(capsys):
    assert main(["frobnicate"]) == 1
    assert "frobnicate" in capsys.readouterr().err


def test_global_flags_parse():
    args = build_parser().parse_args(["-v", "-n", "-c", "cfg.yaml", "version"])
    assert args.verbose is True
    assert args.global_dry_run is True
    assert args.config == "cfg.yaml"


def test_no_arguments_prints_help(capsys):
    assert main([]) == 0
    assert "go-ddd-scaffold" in capsys.readouterr().out