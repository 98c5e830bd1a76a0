import logging
from threading import Lock, Thread
from typing import Callable
from hypview.common.api import get_game_packages
from hypview.common.api.resource import PackageDocument
from hypview.common.formatting import format_document
from hypview.common.message import derive_share_message
from hypview.constants import PLACEHOLDER_TEXT
from hypview.exceptions import HypViewError


logger = logging.getLogger(__name__)


class ViewerState:
    """
    Latest fetch result shared between the fetch worker and the display.

    Every slot is read and replaced under the lock, the lock is never held
    while fetching.
    """

    def __init__(self, fetcher: Callable[[], PackageDocument] | None = None):
        if fetcher is None:
            fetcher = get_game_packages
        self.fetcher = fetcher
        self._lock = Lock()
        self._document: PackageDocument | None = None
        self._main_text = PLACEHOLDER_TEXT
        self._pre_download_text = ""
        self._patches_text = ""
        self._message = ""
        self._error = ""

    def _get(self, name: str):
        with self._lock:
            return getattr(self, name)

    @property
    def document(self) -> PackageDocument | None:
        return self._get("_document")

    @property
    def main_text(self) -> str:
        return self._get("_main_text")

    @property
    def pre_download_text(self) -> str:
        return self._get("_pre_download_text")

    @property
    def patches_text(self) -> str:
        return self._get("_patches_text")

    @property
    def message(self) -> str:
        return self._get("_message")

    @property
    def error(self) -> str:
        return self._get("_error")

    def refresh(self) -> bool:
        """
        Fetch and format the packages, then publish the result.

        Returns:
            bool: Whether the fetch succeeded.
        """
        try:
            document = self.fetcher()
            main, pre_download, patches = format_document(document)
        except HypViewError as e:
            logger.error("Fetching game packages failed: %s", e)
            self._publish_error(str(e))
            return False
        except Exception as e:
            logger.exception("Unexpected error while fetching game packages")
            self._publish_error(f"{type(e).__name__}: {e}")
            return False
        with self._lock:
            self._document = document
            self._main_text = main
            self._pre_download_text = pre_download
            self._patches_text = patches
            self._error = ""
        return True

    def _publish_error(self, error: str):
        with self._lock:
            self._document = None
            self._main_text = ""
            self._pre_download_text = ""
            self._patches_text = ""
            self._error = f"Error fetching data: {error}"

    def fetch_in_background(self) -> Thread:
        """
        Clear the share message and fetch in a new daemon thread.

        Overlapping fetches aren't deduplicated, the last one to finish wins.
        """
        with self._lock:
            self._message = ""
        thread = Thread(target=self.refresh, daemon=True)
        thread.start()
        return thread

    def convert_to_message(self) -> str:
        message = derive_share_message(self.main_text)
        with self._lock:
            self._message = message
        return message

    def report_text(self) -> str:
        with self._lock:
            sections = [self._main_text, self._pre_download_text, self._patches_text]
        return "\n".join(x.rstrip("\n") + "\n" for x in sections if x)

    def clipboard_text(self) -> str:
        with self._lock:
            if self._message:
                return self._message
            return self._main_text if self._main_text else self._error

    def display_text(self) -> str:
        with self._lock:
            if self._message:
                return self._message
            if self._error:
                return self._error
        return self.report_text()
