import logging
from hypview.viewer.gui import run

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
