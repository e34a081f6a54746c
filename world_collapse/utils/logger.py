#!filepath: world_collapse/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - 默认输出到 stderr
    - 配置 log_dir 后按日期切割写文件
    - 支持日志保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self) -> None:
        """
        配置全局 logger（会替换已有 sink）
        """

        logger.remove()

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                enqueue=True,  # 多进程安全
                backtrace=True,
                diagnose=True,
            )
        else:
            logger.add(
                sink=sys.stderr,
                level=self.level,
                format="{time:HH:mm:ss} | {level} | {message}",
            )

    def configure(self, cfg) -> None:
        """
        用 LogConfig 重新配置（AppConfig.load 之后调用）
        """
        self.log_dir = cfg.dir
        self.rotation = cfg.rotation
        self.retention = cfg.retention
        self.level = cfg.level
        self._configure()
        logger.debug("Logger reconfigured: dir={} level={}", self.log_dir, self.level)

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(
                        f"[CALL] {func.__name__} args={args}, kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.debug(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs（AppConfig 加载后可 configure）
logs = Logging()
