"""projector — directory-scoped key/value store for the command line.

Values live in a single JSON file and are looked up from the current
directory upwards, so nearer directories override their ancestors.
"""

from projector.version import __version__

__all__: list[str] = ["__version__"]
