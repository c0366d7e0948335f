import logging
import os


class DemanglerConfig(object):

    # note to self: always change this in setup.py as well!
    VERSION = "1.0.0"
    PROJECT_ROOT = str(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)-15s: %(name)-32s - %(message)s"
    # count hits and misses of the interning tables of each Context
    TRACK_STATISTICS = False
