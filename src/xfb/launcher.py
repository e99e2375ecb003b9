"""Process entry point for the XFB player.

Sets up logging, then hands over to the bootstrap orchestrator which owns
the whole startup sequence and finally the Qt event loop.
"""

from __future__ import annotations

import sys

from .app.bootstrap import BootstrapOrchestrator
from .services.logging_service import LoggingService, configure_logging


def main(argv: list[str] | None = None) -> int:  # pragma: no cover - runtime
    configure_logging()
    log_capture = LoggingService()
    log_capture.attach_root()
    orchestrator = BootstrapOrchestrator(
        argv=argv if argv is not None else sys.argv,
        logging_service=log_capture,
    )
    try:
        return orchestrator.run()
    finally:
        log_capture.detach_root()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
