# topmark:header:start
#
#   project      : CMDA
#   file         : analyze.py
#   file_relpath : src/cmda/cli/commands/analyze.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMDA `analyze` command.

Classifies every object produced by the configured object source and writes,
per distinct content model, ``cmodel-<n><suffix>`` and ``cmodel-<n>.members.txt``
into the (empty) output directory.

Examples:
  Analyze using a configuration file:

    $ cmda analyze cmda.toml

  Analyze without a configuration file:

    $ cmda analyze --source-dir objects --output-dir out --serializer toml
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmda.analyzer.engine import Analyzer
from cmda.cli.cmd_common import build_component, build_config
from cmda.cli.errors import translate_error
from cmda.cli.options import CONTEXT_SETTINGS, common_source_options
from cmda.config.factory import ComponentRegistry
from cmda.config.logging import get_logger
from cmda.core.errors import CmdaError

if TYPE_CHECKING:
    from pathlib import Path

    from cmda.analyzer.engine import AnalysisResult
    from cmda.config.logging import CmdaLogger
    from cmda.config.model import AnalyzerConfig

logger: CmdaLogger = get_logger(__name__)


@click.command(
    name="analyze",
    help="Classify objects and write content models plus membership lists.",
    context_settings=CONTEXT_SETTINGS,
)
@common_source_options
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(path_type=str),
    default=None,
    help="Output directory; must be empty or absent (overrides output_dir).",
)
@click.option(
    "--serializer",
    "serializer",
    type=click.Choice(ComponentRegistry.names("serializer")),
    default=None,
    help="Content model output format (overrides [serializer] name).",
)
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Print only the object and content model counts.",
)
def analyze_command(
    *,
    config_path: str | None,
    source_dir: str | None,
    pattern: str | None,
    output_dir: str | None,
    serializer: str | None,
    summary_mode: bool,
) -> None:
    """Run the analyzer.

    Args:
        config_path (str | None): TOML configuration file.
        source_dir (str | None): Object directory override.
        pattern (str | None): Object file glob override.
        output_dir (str | None): Output directory override.
        serializer (str | None): Serializer name override.
        summary_mode (bool): Print counts only.
    """
    config: AnalyzerConfig = build_config(
        config_path,
        output_dir=output_dir,
        source_dir=source_dir,
        pattern=pattern,
        serializer=serializer,
    )
    try:
        target: Path = config.require_output_dir()
    except CmdaError as e:
        raise translate_error(e) from e

    analyzer = Analyzer(
        build_component("classifier", config),
        build_component("serializer", config),
        encoding=config.encoding,
    )
    objects = build_component("object_source", config)

    try:
        result: AnalysisResult = analyzer.classify_all(objects, target)
    except CmdaError as e:
        logger.error("Analysis failed: %s", e)
        raise translate_error(e) from e
    except Exception as e:  # pragma: no cover - last resort
        logger.exception("Unexpected error during analysis")
        raise translate_error(e) from e

    if not summary_mode:
        for cm in result.cmodels:
            noun: str = "member" if cm.member_count == 1 else "members"
            click.echo(f"{cm.cmodel_path.name}  {cm.pid}  {cm.member_count} {noun}")
    click.echo(
        f"Classified {result.object_count} object(s) into "
        f"{result.cmodel_count} content model(s) in {result.output_dir}"
    )
