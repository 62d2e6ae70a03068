"""
Logger wrapper used across duckdb_setup. Each record is emitted as a JSON LogLine.
"""

import inspect
import logging
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the setup log
    """

    time: str
    level: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class SetupLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "duckdb_setup", level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

    def attach_stderr_handler(self) -> Optional[logging.Handler]:
        """
        Attach a stderr handler unless the logger or the root logger already has one.
        """
        if self.logger.handlers or logging.getLogger().handlers:
            return None
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.logger.addHandler(handler)
        return handler

    def log(self, debug_message: str, level: int) -> None:
        """
        Log the message at the given level, tagged with the caller's location.
        """
        debug_message = debug_message.replace("\n", " ")

        caller_file = "<unknown>"
        caller_name = "<unknown>"
        caller_line = 0
        frame = inspect.currentframe()
        if frame is not None and frame.f_back is not None:
            caller = frame.f_back
            caller_file = caller.f_code.co_filename.replace("\\", "/").split("/")[-1]
            caller_name = caller.f_code.co_name
            caller_line = caller.f_lineno
        del frame

        self.logger.log(
            level=level,
            msg=LogLine(
                time=str(datetime.now()),
                level=logging.getLevelName(level),
                caller_file=caller_file,
                caller_name=caller_name,
                caller_line=caller_line,
                message=debug_message,
            ).model_dump_json(),
        )
