"""Router configuration.

RouterConfig is a frozen dataclass. Build one and pass it to the Dispatcher.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(max_segments=20, debug=True)
    """

    # Route pattern limits (checked by Route.parse)
    max_path_length: int = 2048
    max_segments: int = 50
    max_segment_length: int = 255

    # Log every located route at DEBUG on the "switchyard.dispatch" logger
    debug: bool = False
