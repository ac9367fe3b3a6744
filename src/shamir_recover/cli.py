# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Command line interface: load share fixtures and print recovered secrets."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import click
import yaml

from .audit import AuditTrail
from .errors import ReconstructionError
from .policy import policy
from .reconstruct import reconstruct_detailed
from .samples import DATASETS

_logger = logging.getLogger(__name__)


def load_share_file(path: str | Path) -> Mapping[str, Any]:
    """Read a JSON fixture, or YAML for ``.yaml``/``.yml`` files."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"{path}: cannot read share file: {exc}") from exc
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise click.ClickException(f"{path}: cannot parse share file: {exc}") from exc
    if not isinstance(data, Mapping):
        raise click.ClickException(f"{path}: share file must contain a mapping")
    # YAML turns unquoted keys such as 1 into ints
    return {str(key): value for key, value in data.items()}


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline details.")
def main(verbose: bool) -> None:
    """Recover Shamir secrets from base-encoded shares."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else policy.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per input.")
@click.option("--keep-going", is_flag=True, help="Report failed inputs and continue.")
@click.option(
    "--audit-dir",
    type=click.Path(file_okay=False),
    default=policy.audit_dir,
    help="Record a signed audit event per input in this directory.",
)
def recover(files: tuple[str, ...], as_json: bool, keep_going: bool, audit_dir: str | None) -> None:
    """Reconstruct the secret of every share FILE."""
    trail = AuditTrail(audit_dir) if audit_dir else None
    failures = 0
    for name in files:
        try:
            result = reconstruct_detailed(load_share_file(name))
        except (ReconstructionError, click.ClickException) as exc:
            message = exc.format_message() if isinstance(exc, click.ClickException) else str(exc)
            if trail is not None:
                trail.record_failure(name, exc)
            if not keep_going:
                raise click.ClickException(f"{name}: {message}") from exc
            _logger.warning("Skipping %s: %s", name, message)
            click.echo(f"{name}: error: {message}", err=True)
            failures += 1
            continue

        if trail is not None:
            trail.record_reconstruction(name, result)
        if as_json:
            click.echo(json.dumps({"source": name, "secret": str(result.secret), "threshold": result.config.k}))
        else:
            click.echo(f"{name}: {result.secret}")

    if failures:
        click.get_current_context().exit(1)


@main.command()
def demo() -> None:
    """Reconstruct the bundled example share sets."""
    for label, data in DATASETS.items():
        click.echo(f"{label} Reconstructed Value: {reconstruct_detailed(data).secret}")


if __name__ == "__main__":
    main()
