# config.py
import os

# ======= 搜索预算 =======
# <=0 表示不限制
MAX_BACKJUMPS = int(os.getenv("KT_MAX_BACKJUMPS", "2000000"))
TIMEOUT_SEC   = float(os.getenv("KT_TIMEOUT_SEC", "30"))

# ======= 日志 =======
LOG_LEVEL = os.getenv("KT_LOG_LEVEL", "WARNING").upper()
LOG_FILE  = os.getenv("KT_LOG_FILE", "")

# ======= Web 服务 =======
HOST  = os.getenv("KT_HOST", "127.0.0.1")
PORT  = int(os.getenv("KT_PORT", "5000"))
DEBUG = os.getenv("KT_DEBUG", "0") == "1"


class CFG:
    MAX_BACKJUMPS = MAX_BACKJUMPS
    TIMEOUT_SEC   = TIMEOUT_SEC

    LOG_LEVEL = LOG_LEVEL
    LOG_FILE  = LOG_FILE

    HOST  = HOST
    PORT  = PORT
    DEBUG = DEBUG


__all__ = ["CFG"]
