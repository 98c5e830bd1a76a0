from cleo.commands.command import Command
from threading import Thread
from time import sleep


class ProgressIndicator:
    def auto_advance(self):
        """
        Automatically advance the progress indicator.
        """
        while self.progress._started:
            self.progress.advance()
            sleep(self.progress._interval / 1000)

    def __init__(
        self, command: Command, interval: int = None, values: list[str] = None
    ):
        self.command = command
        if not interval:
            interval = 100
        if not values:
            values = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]
        self.progress = self.command.progress_indicator(
            interval=interval, values=values
        )
        self.thread = Thread(target=self.auto_advance)
        self.thread.daemon = True

    def start(self, message: str):
        """
        Start the progress indicator.
        """
        self.progress.start(message)
        self.thread.start()

    def finish(self, message: str, reset_indicator=False):
        """
        Finish the progress indicator.
        """
        self.progress.finish(message=message, reset_indicator=reset_indicator)
