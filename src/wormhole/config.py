"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from wormhole.routing.pattern import MatchOptions


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(case_sensitive=True, prefix="/api")
        router = Router(config)

    Every route the router creates inherits the matching options. A
    mounted child keeps the options it was built with.
    """

    # Matching
    case_sensitive: bool = False
    strict_slashes: bool = False  # "/foo" and "/foo/" are different paths
    match_to_end: bool = True  # False allows "/foo" to match "/foo/bar"

    # Initial value of the router's current prefix
    prefix: str = ""

    @property
    def match_options(self) -> MatchOptions:
        """The options handed to every compiled path template."""
        return MatchOptions(
            case_sensitive=self.case_sensitive,
            strict_slashes=self.strict_slashes,
            match_to_end=self.match_to_end,
        )
