from itdepends.parsers.base import TreeParser
from itdepends.parsers.maven import MavenTreeParser

PARSERS: dict[str, type[TreeParser]] = {
    MavenTreeParser.name: MavenTreeParser,
}


def get_parser(name: str) -> TreeParser:
    """Return a parser instance for a registered input format."""
    try:
        return PARSERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown input format {name!r} (available: {', '.join(sorted(PARSERS))})",
        )
