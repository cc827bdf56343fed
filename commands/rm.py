from __future__ import annotations

import logging
import shutil
import time
from pathlib import Path
from typing import Callable

from .models import DeletionOutcome

logger = logging.getLogger(__name__)


class DeletionExecutor:
    """Removes a directory tree once and reports how it went.

    The remover is ``shutil.rmtree`` unless another callable is given. Any
    ``OSError`` it raises becomes a failed outcome; partial state left behind
    by a failed removal is not inspected.
    """

    def __init__(self, remover: Callable[[Path], None] = shutil.rmtree):
        self.remover = remover

    def run(self, target_path: Path) -> DeletionOutcome:
        logger.debug("removing %s", target_path)
        error_detail = None

        start = time.perf_counter()
        try:
            self.remover(target_path)
        except OSError as exc:
            error_detail = str(exc)
        elapsed = time.perf_counter() - start

        if error_detail is not None:
            logger.debug("could not remove %s: %s", target_path, error_detail)
            return DeletionOutcome(succeeded=False, elapsed_seconds=elapsed, error_detail=error_detail)

        logger.debug("removed %s in %.6fs", target_path, elapsed)
        return DeletionOutcome(succeeded=True, elapsed_seconds=elapsed)
