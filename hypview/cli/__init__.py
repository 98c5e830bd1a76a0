import logging
from cleo.application import Application
from hypview.cli import commands

application = Application("hypview")
for command in commands.exports:
    application.add(command)


def run():
    logging.basicConfig(
        level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s"
    )
    application.run()
