"""
Subprocess adapter: runs the external SVG renderer.

Invocations are blocking and have no timeout.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from ..models import IconExportError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Runs a command with subprocess.run and raises IconExportError on failure."""

    def run(self, argv: Sequence[str]) -> None:
        cmd = list(argv)
        logger.info("Running: %s", " ".join(cmd))
        try:
            # Output is diagnostic text only, decoded leniently
            subprocess.run(cmd, check=True, capture_output=True, text=True, errors="replace")
        except OSError as e:
            raise IconExportError(cmd, None, str(e)) from e
        except subprocess.CalledProcessError as e:
            raise IconExportError(cmd, e.returncode, e.stderr or "") from e
