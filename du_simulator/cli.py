"""
CLI interface for du-simulator.

Provides commands to manage the simulator fixture, run single simulated
actions against an in-memory workflow, and generate import manifests.

The fixture lives at <temp dir>/du-simulator-data.json, where the temp dir
is the first of TMPDIR, TMP, TEMP, TEMPDIR that is set, else /tmp.
"""


import json

import click
from rich.table import Table

from du_simulator import __version__
from du_simulator.utils import console, print_error, print_info, print_success


@click.group()
@click.version_option(version=__version__, prog_name="du-simulator")
@click.pass_context
def main(ctx):
    """
    du-simulator - Fixture-driven update content handler simulator.

    Outcomes of download, install, apply, cancel and isInstalled are read
    from the simulator fixture instead of doing real work.
    """
    from du_simulator.config import load_config

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config()
    except Exception as e:
        # Commands that need the config report this themselves
        ctx.obj["config_error"] = str(e)


@main.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """Initialize du-simulator configuration."""
    from du_simulator.config import SimulatorConfig, get_simulator_home
    import yaml

    home = get_simulator_home()
    if not home.exists():
        home.mkdir(parents=True)

    cfg_path = home / "config.yaml"
    if cfg_path.exists() and not force:
        click.echo(f"Config already exists at {cfg_path}. Use --force to overwrite.", err=True)
        raise SystemExit(1)

    cfg_path.write_text(yaml.safe_dump(SimulatorConfig().to_dict(), sort_keys=False))
    click.echo(f"Initialized du-simulator config at {cfg_path}")


# =============================================================================
# Fixture Commands
# =============================================================================

@main.group("fixture")
def fixture_group():
    """Manage the simulator fixture file."""
    pass


def _require_fixture_path():
    from du_simulator.fixture import get_simulator_data_file_path

    path = get_simulator_data_file_path()
    if path is None:
        click.echo("✗ Temporary directory path is too long", err=True)
        raise SystemExit(1)
    return path


@fixture_group.command("path")
def fixture_path():
    """Print the fixture file location."""
    click.echo(str(_require_fixture_path()))


@fixture_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing fixture")
def fixture_init(force: bool):
    """Write a fixture that reproduces the default outcomes.

    Edit the generated file to script failures, e.g. a per-file download
    failure:

        "download": {"fw.bin": {"resultCode": 0, "extendedResultCode": 42}}
    """
    from du_simulator.fixture import build_fixture_template

    path = _require_fixture_path()
    if path.exists() and not force:
        click.echo(f"Fixture already exists at {path}. Use --force to overwrite.", err=True)
        raise SystemExit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(build_fixture_template(), indent=2) + "\n")
    click.echo(f"Wrote fixture to {path}")


@fixture_group.command("show")
def fixture_show():
    """Show the current fixture."""
    from du_simulator.fixture import load_fixture

    path = _require_fixture_path()
    fixture = load_fixture(path)
    if fixture is None:
        click.echo(f"No usable fixture at {path}; default outcomes apply.")
        return

    try:
        click.echo(f"Fixture: {path}")
        click.echo()
        data = {action: fixture.get(action) for action in _fixture_keys(fixture)}
        click.echo(json.dumps(data, indent=2))
    finally:
        fixture.release()


def _fixture_keys(fixture) -> list[str]:
    from du_simulator.schemas import Action

    return [action.value for action in Action if fixture.get(action.value) is not None]


# =============================================================================
# Run Command - simulate one action
# =============================================================================

@main.command("run")
@click.argument(
    "action",
    type=click.Choice(["download", "install", "apply", "cancel", "isInstalled"]),
)
@click.option("--file", "files", multiple=True, help="Standalone update file name (repeatable)")
@click.option("--bundle-file", "bundle_files", multiple=True, help="Bundle update file name (repeatable)")
@click.option("--criteria", default=None, help="Installed criteria for isInstalled")
@click.option("--log-level", default=None, help="Override the configured log level")
@click.pass_context
def run(ctx, action: str, files, bundle_files, criteria, log_level):
    """
    Run one simulated ACTION and print its result.

    Exits with status 1 when the result code is a failure.

    Examples:

        du-simulator run install

        du-simulator run download --file fw.bin --file extra.bin

        du-simulator run isInstalled --criteria 1.0.0
    """
    from du_simulator.handlers import SimulatorHandler
    from du_simulator.workflow import InMemoryWorkflow

    if "config" not in ctx.obj:
        click.echo(f"✗ Config not loaded: {ctx.obj.get('config_error', 'Unknown error')}", err=True)
        raise SystemExit(1)

    workflow = InMemoryWorkflow.from_filenames(
        update_files=list(files),
        bundle_updates=list(bundle_files),
        installed_criteria=criteria,
    )

    with SimulatorHandler(config=ctx.obj["config"], log_level=log_level) as handler:
        result = handler.run(action, workflow)

    table = Table(title=f"{action} result")
    table.add_column("resultCode", justify="right")
    table.add_column("extendedResultCode", justify="right")
    table.add_column("resultDetails")
    table.add_row(
        str(result.result_code),
        str(result.extended_result_code),
        workflow.result_details if workflow.result_details is not None else "",
    )
    console.print(table)

    if result.is_failure:
        print_error(f"{action} failed")
        raise SystemExit(1)
    print_success(f"{action} succeeded")


# =============================================================================
# Manifest Command - import manifest generator
# =============================================================================

@main.command("manifest")
@click.option("-p", "provider", required=True, help="Update provider")
@click.option("-n", "name", required=True, help="Update name")
@click.option("-v", "version", required=True, help="Update version")
@click.option("-t", "update_type", required=True, help="Update type, e.g. microsoft/swupdate:1")
@click.option("-i", "installed_criteria", required=True, help="Installed criteria")
@click.option(
    "-c", "compatibility", multiple=True, required=True,
    help="Comma separated (manufacturer,model) compatibility information. May be repeated.",
)
@click.option("-o", "output", type=click.Path(dir_okay=False), default=None, help="Write to file instead of stdout")
@click.argument("files", nargs=-1, type=click.Path())
def manifest(provider, name, version, update_type, installed_criteria, compatibility, output, files):
    """Create an import manifest for FILES."""
    from pathlib import Path

    from du_simulator.errors import ManifestError
    from du_simulator.manifest import create_import_manifest

    try:
        document = create_import_manifest(
            provider=provider,
            name=name,
            version=version,
            update_type=update_type,
            installed_criteria=installed_criteria,
            compatibility=list(compatibility),
            files=[Path(f) for f in files],
        )
    except ManifestError as e:
        click.echo(f"ERROR: {e}", err=True)
        raise SystemExit(1)

    text = json.dumps(document, indent=2)
    if output:
        Path(output).write_text(text + "\n")
        print_info(f"Wrote import manifest to {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
