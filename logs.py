import logging
import sys

from config import CFG

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name):
    logger = logging.getLogger(f"knights_tour.{name}")
    if logger.handlers:
        return logger

    if CFG.LOG_FILE:
        handler = logging.FileHandler(CFG.LOG_FILE, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr) # stdout 只留给命令行输出
    handler.setFormatter(logging.Formatter(FORMAT, datefmt=DATEFMT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, CFG.LOG_LEVEL, logging.WARNING))
    logger.propagate = False
    return logger
