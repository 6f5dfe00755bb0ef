# topmark:header:start
#
#   project      : CMDA
#   file         : directives.py
#   file_relpath : src/cmda/cli/commands/directives.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMDA `directives` command.

Runs the configured classifier over the object source without writing any
artifacts and prints the BMech directives of each content model, for use by
a downstream generator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmda.cli.cmd_common import build_component, build_config
from cmda.cli.errors import translate_error
from cmda.cli.options import CONTEXT_SETTINGS, common_source_options
from cmda.core.errors import ClassificationError, CmdaError

if TYPE_CHECKING:
    from cmda.analyzer.classifier import Classifier
    from cmda.config.model import AnalyzerConfig
    from cmda.model.cmodel import ContentModel


@click.command(
    name="directives",
    help="Print the BMech directives of each content model.",
    context_settings=CONTEXT_SETTINGS,
)
@common_source_options
def directives_command(
    *,
    config_path: str | None,
    source_dir: str | None,
    pattern: str | None,
) -> None:
    """Classify all objects and print per-model directives.

    Args:
        config_path (str | None): TOML configuration file.
        source_dir (str | None): Object directory override.
        pattern (str | None): Object file glob override.
    """
    config: AnalyzerConfig = build_config(config_path, source_dir=source_dir, pattern=pattern)
    classifier: Classifier = build_component("classifier", config)
    objects = build_component("object_source", config)

    # Distinct models in first-seen order; equality, not identity.
    cmodels: dict[ContentModel, ContentModel] = {}
    try:
        for obj in objects:
            try:
                cmodel: ContentModel = classifier.get_content_model(obj)
            except CmdaError:
                raise
            except Exception as e:
                raise ClassificationError(
                    f"Classifier failed on {obj.pid}: {e}", pid=obj.pid
                ) from e
            cmodels.setdefault(cmodel, cmodel)
    except CmdaError as e:
        raise translate_error(e) from e

    for cmodel in cmodels:
        click.echo(f"# {cmodel.pid}")
        directives: str | None = classifier.get_directives(cmodel.pid)
        click.echo(directives.rstrip("\n") if directives else "(none)")
