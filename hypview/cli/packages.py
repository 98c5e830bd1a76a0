import logging
from functools import partial
import pyperclip
from cleo.commands.command import Command
from cleo.helpers import option
from hypview.cli import utils
from hypview.common import Settings
from hypview.common.api import get_game_packages
from hypview.common.enums import GameChannel
from hypview.viewer.state import ViewerState


default_options = [
    option(
        "channel",
        "c",
        description="Game channel (overseas or china)",
        flag=False,
    ),
    option(
        "game-id",
        "g",
        description="Game id to fetch, can be repeated",
        flag=False,
        multiple=True,
    ),
]


class State:
    settings: Settings = None
    viewer: ViewerState = None


def callback(command: Command) -> bool:
    """
    Base callback for all commands

    Returns:
        bool: Whether the options are valid.
    """
    if command.io.is_debug():
        logging.getLogger("hypview").setLevel(logging.DEBUG)
    State.settings = Settings.load()
    channel = command.option("channel")
    if channel:
        try:
            State.settings.channel = GameChannel.from_str(channel)
        except ValueError:
            command.line_error(f"<error>Invalid channel: {channel}</error>")
            return False
    game_ids = command.option("game-id")
    if game_ids:
        State.settings.game_ids = game_ids
    State.viewer = ViewerState(
        partial(
            get_game_packages,
            channel=State.settings.channel,
            game_ids=State.settings.game_ids,
        )
    )
    return True


def fetch(command: Command) -> bool:
    progress = utils.ProgressIndicator(command)
    progress.start("Fetching game packages... ")
    if not State.viewer.refresh():
        progress.finish(f"<error>{State.viewer.error}</error>")
        return False
    progress.finish("<comment>Game packages fetched successfully.</comment>")
    return True


class PackagesShowCommand(Command):
    name = "packages show"
    description = "Show the download links of the game packages"
    options = default_options + [
        option("pre-download", description="Show the pre-download packages"),
        option("patches", description="Show the pre-download patches"),
        option("all", "a", description="Show everything available"),
    ]

    def handle(self):
        if not callback(command=self):
            return 1
        if not fetch(self):
            return 1
        show_all = self.option("all")
        self.line(State.viewer.main_text)
        if show_all or self.option("pre-download"):
            pre_download = State.viewer.pre_download_text
            self.line(pre_download if pre_download else "No pre-download available.")
        if show_all or self.option("patches"):
            patches = State.viewer.patches_text
            self.line(patches if patches else "No pre-download patches available.")


class PackagesMessageCommand(Command):
    name = "packages message"
    description = "Show a short message with the download links to share"
    options = default_options

    def handle(self):
        if not callback(command=self):
            return 1
        if not fetch(self):
            return 1
        self.line(State.viewer.convert_to_message())


class PackagesCopyCommand(Command):
    name = "packages copy"
    description = "Copy the share message (or the full report) to the clipboard"
    options = default_options + [
        option("full", "f", description="Copy the full report instead"),
    ]

    def handle(self):
        if not callback(command=self):
            return 1
        if not fetch(self):
            return 1
        if not self.option("full"):
            State.viewer.convert_to_message()
        try:
            pyperclip.copy(State.viewer.clipboard_text())
        except pyperclip.PyperclipException as e:
            self.line_error(f"<error>Couldn't copy to clipboard: {e}</error>")
            return 1
        self.line("<comment>Copied to clipboard.</comment>")


class GuiCommand(Command):
    name = "gui"
    description = "Open the package viewer window"
    options = default_options

    def handle(self):
        if not callback(command=self):
            return 1
        # Imported here so the CLI works without tkinter
        from hypview.viewer.gui import run

        run(state=State.viewer)


commands = [
    GuiCommand,
    PackagesCopyCommand,
    PackagesMessageCommand,
    PackagesShowCommand,
]
