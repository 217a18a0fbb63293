import csv
import io
from collections.abc import Iterable
from typing import TextIO

from itdepends.core.errors import OutputError
from itdepends.models.artifact import FlatArtifact


def render_report(artifacts: Iterable[FlatArtifact]) -> str:
    """Render ``group,artifact,version,latestVersion`` lines, in the given order."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    for a in artifacts:
        writer.writerow([
            a.group_id, a.artifact_id, a.version, a.latest_version or '',
        ])
    return buffer.getvalue()


def write_report(stream: TextIO, artifacts: Iterable[FlatArtifact]) -> None:
    """Render the whole report, then write it to ``stream`` in one go."""
    report = render_report(artifacts)
    try:
        stream.write(report)
        stream.flush()
    except (OSError, ValueError) as e:
        raise OutputError(str(e), cause=e) from e
