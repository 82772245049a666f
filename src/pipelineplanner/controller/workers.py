"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for handling long-running tasks.

Why is this file needed?
------------------------
1. Responsiveness: For very large networks the MST can take noticeable time;
   running it on the GUI thread would freeze the canvas.
2. Consistency: The worker solves a snapshot taken under the Store's lock,
   and hands the result back through Store.accept_mst, which drops it if
   the network changed in the meantime.

Classes:
    MSTWorker: Runs Kruskal's algorithm on a snapshot of the Store.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QThread, Signal

from pipelineplanner.controller.mst import MSTSolver

if TYPE_CHECKING:
    from pipelineplanner.app.state import Store

logger = logging.getLogger(__name__)


class MSTWorker(QThread):
    # Signals to update the UI from the background
    finished_with_result = Signal(object)  # MSTResult
    discarded = Signal()
    error_occurred = Signal(str)

    def __init__(self, store: Store):
        super().__init__()
        self.store = store

    def run(self):
        try:
            snapshot = self.store.snapshot()
            logger.info(
                f"Solving MST in background: {snapshot.vertex_count} sites, "
                f"{len(snapshot.edges)} links."
            )
            result = MSTSolver.solve(snapshot.vertex_count, snapshot.edges)

            if self.store.accept_mst(result, snapshot):
                self.finished_with_result.emit(result)
            else:
                self.discarded.emit()

        except Exception as e:
            logger.error(f"Error in MSTWorker: {e}")
            self.error_occurred.emit(str(e))
