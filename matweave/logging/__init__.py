from .logging import (  # noqa: F401
    MatweaveJSONFormatter,
    RotatingFileHandlerWithDir,
    setup_logging,
)
