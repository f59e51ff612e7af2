#!/usr/bin/env python3
'''
Hide messages into PNG images.

 $ pngmessage.py encode image.png ruSt "meet me at midnight"
 $ pngmessage.py decode image.png ruSt
 $ pngmessage.py print image.png
 $ pngmessage.py remove image.png ruSt

Set the environment variable DEBUG to see what's going on.
'''
import logging
import os
import sys

from pngchunks.commands import main


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


if __name__ == '__main__':
    sys.exit(main(sys.argv))
