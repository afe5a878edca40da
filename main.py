# ===== Part 1: Imports & Logging ============================================
import asyncio
import logging
import sys

from PySide6 import QtAsyncio
from PySide6.QtWidgets import QApplication

from modules.equipment.api.client import EquipmentApiClient
from modules.equipment.config import load_settings
from modules.equipment.controllers.board import EquipmentBoard
from modules.equipment.panels import EquipmentBoardWindow, QtConfirmer, ToastNotifier

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
# httpx logs every request at INFO; the client logs its own calls at DEBUG
logging.getLogger("httpx").setLevel(logging.WARNING)


# ===== Part 2: Application wiring ==========================================
async def run_board(settings_file: str = "settings.json") -> None:
    settings = load_settings(settings_file)
    logger.info("Connecting to equipment API at %s", settings.api_base_url)

    client = EquipmentApiClient(settings.api_base_url, timeout=settings.request_timeout)
    notifier = ToastNotifier(duration_ms=settings.toast_duration_ms)
    confirmer = QtConfirmer()
    board = EquipmentBoard(client, notifier, confirmer)

    window = EquipmentBoardWindow(board)
    notifier.attach(window)
    confirmer.parent = window
    closed = asyncio.Event()
    window.closed.connect(closed.set)
    window.show()

    try:
        await board.mount()
        await closed.wait()
    finally:
        await client.aclose()


# ===== Part 3: Entrypoint ===================================================
def main() -> None:
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Equipment Tracker")
    QtAsyncio.run(run_board(), keep_running=False, quit_qapp=True)


if __name__ == "__main__":
    main()
