from hypview.cli import packages

exports = [command() for command in packages.commands]
