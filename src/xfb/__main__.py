"""Module entrypoint for `python -m xfb`.

Delegates to `xfb.launcher.main` to launch the player.
"""

from __future__ import annotations

from .launcher import main


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
