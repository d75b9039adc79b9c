# Core module exports
from lingo.core.config import settings, get_settings
from lingo.core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    engine_logger,
    registry_logger,
    cli_logger,
)
