import logging
import tkinter as tk
from functools import partial
from tkinter import messagebox, ttk
from tkinter.scrolledtext import ScrolledText
import pyperclip
from hypview.common import Settings
from hypview.common.api import get_game_packages
from hypview.constants import APP_TITLE
from hypview.viewer.state import ViewerState


logger = logging.getLogger(__name__)

# Milliseconds between two refreshes of the text area
POLL_INTERVAL = 200


class PackageViewer:
    def __init__(self, root: tk.Tk, state: ViewerState | None = None):
        self.root = root
        self.state = state if state is not None else ViewerState()
        self._shown = None
        root.title(APP_TITLE)
        root.geometry("800x600")

        buttons = ttk.Frame(root, padding=4)
        buttons.pack(side=tk.TOP, fill=tk.X)
        ttk.Button(buttons, text="Fetch Data", command=self.fetch).pack(side=tk.LEFT)
        ttk.Button(
            buttons, text="Convert to Message", command=self.state.convert_to_message
        ).pack(side=tk.LEFT, padx=4)
        ttk.Button(buttons, text="Copy to Clipboard", command=self.copy).pack(
            side=tk.LEFT
        )
        ttk.Separator(root, orient=tk.HORIZONTAL).pack(fill=tk.X)

        self.text = ScrolledText(root, wrap=tk.WORD, state=tk.DISABLED)
        self.text.pack(fill=tk.BOTH, expand=True)
        self.poll()

    def fetch(self):
        self.state.fetch_in_background()

    def copy(self):
        try:
            pyperclip.copy(self.state.clipboard_text())
        except pyperclip.PyperclipException as e:
            logger.error("Couldn't copy to clipboard: %s", e)
            messagebox.showerror(APP_TITLE, f"Couldn't copy to clipboard: {e}")

    def poll(self):
        content = self.state.display_text()
        if content != self._shown:
            self._shown = content
            self.text.configure(state=tk.NORMAL)
            self.text.delete("1.0", tk.END)
            self.text.insert(tk.END, content)
            self.text.configure(state=tk.DISABLED)
        self.root.after(POLL_INTERVAL, self.poll)


def run(state: ViewerState | None = None, settings: Settings | None = None):
    if state is None:
        if settings is None:
            settings = Settings.load()
        state = ViewerState(
            partial(
                get_game_packages,
                channel=settings.channel,
                game_ids=settings.game_ids,
            )
        )
    root = tk.Tk()
    PackageViewer(root, state=state)
    root.mainloop()
