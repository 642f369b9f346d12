import os, sys, logging, itertools
from typing import Optional
from functools import partial

_instances = itertools.count()

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        # One logger per instance so handlers of other instances stay attached
        self._logger = logging.getLogger(f"{name}.{next(_instances)}")
        self._logger.propagate = False
        if logging_enabled:
            self._logger.setLevel(logging.DEBUG)
            if log_file == "-":
                handler = logging.StreamHandler(sys.stdout)
            else:
                if log_file is None:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'hilite_debug.log')
                handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            self._logger.addHandler(handler)
        else:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
