import sys
from pathlib import Path

import structlog
import typer
from rich.progress import BarColumn
from rich.progress import MofNCompleteColumn
from rich.progress import Progress
from rich.progress import SpinnerColumn
from rich.progress import TextColumn
from rich.progress import TimeElapsedColumn

from itdepends.core.container import get_container
from itdepends.core.decorators import handle_errors
from itdepends.core.logging import console
from itdepends.core.logging import setup_logging
from itdepends.services.report_service import write_report

logger = structlog.get_logger('analyze_command')


@handle_errors
def main(
    input_file: Path = typer.Argument(
        ..., help='Dependency tree JSON (mvn dependency:tree -DoutputType=json)',
    ),
    offline: bool = typer.Option(
        False, '--offline', '--no-fetch',
        help='Skip looking up latest versions on Maven Central',
    ),
):
    """
    Flatten a dependency tree and print group,artifact,version,latestVersion as CSV.
    """
    container = get_container()
    setup_logging(level=container.config.logging.level)
    pipeline = container.create_pipeline(fetch=not offline)

    if offline:
        artifacts = pipeline.run(input_file, fetch=False)
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn('[progress.description]{task.description}'),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn('•'),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task('Fetching latest versions...', total=None)

            def on_progress(artifact):
                progress.update(
                    task, advance=1, total=pipeline.registry.stats.total,
                    description=f'{artifact.group_id}:{artifact.artifact_id}',
                )

            artifacts = pipeline.run(input_file, on_progress=on_progress)

    write_report(sys.stdout, artifacts)
    logger.info('Report written', artifacts=len(artifacts))
