""" Timing log for hpolytope.

Logging of calls is controlled by the configuration file hpolytope.cfg, which should
be placed in the current working directory (where the python script is initiated).
All logging-related information is located in a section in the cfg-file with heading
logging; see sample file below.

By default, timing is switched off. It can be turned on by setting the keyword
'active' to True. The public functions are classified in the following sections

    all: Used to log all functions.
    geometry: Interior points, overlap tests and vertex enumeration.
    utils: The linear program and convex hull backends.

Example logging section of hpolytope.cfg:

    [logging]
    # Activate logging. Without this, the rest of the section has no effect
    active: True
    # Only log specific sections, multiple sections are separated by commas
    sections: geometry
    # Name of the log file, defaults to HPolytopeTimings.log
    file: timings.log

Messages that report on failures (empty or unbounded regions, solver trouble) are
not affected by this section; they go through the module loggers, named after the
modules, and are handled by whatever logging configuration the application has.

"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Sequence

import hpolytope as hp

__all__ = ["time_logger"]


# Try to access configuration information, as activated by the import of hpolytope
try:
    config = hp.config["logging"]
    raw_sections = config.get("sections", "all")
    active_sections = [s.strip().lower() for s in raw_sections.split(",")]
    logger_is_active = config.get("active", "false").strip().lower() == "true"
    log_file = config.get("file", "HPolytopeTimings.log")
except KeyError:
    active_sections = ["all"]
    logger_is_active = False
    log_file = "HPolytopeTimings.log"

always_log = "all" in active_sections

t_logger = logging.getLogger("hpolytope.timer")
t_logger.setLevel(logging.INFO)

if logger_is_active and not t_logger.handlers:
    time_handler = logging.FileHandler(log_file)
    time_handler.setLevel(logging.INFO)
    time_handler.setFormatter(logging.Formatter("%(message)s"))
    t_logger.addHandler(time_handler)


def time_logger(sections: Sequence[str]) -> Callable:
    """A decorator that measures elapsed time for a function.

    Parameters:
        sections: Logging sections the decorated function belongs to.

    """

    def inner_func(func):
        @functools.wraps(func)
        def log_time(*args, **kwargs):
            if not logger_is_active:
                return func(*args, **kwargs)
            if not (always_log or any(s in active_sections for s in sections)):
                return func(*args, **kwargs)

            name = f"{func.__module__}.{func.__name__}"
            t_logger.info(f"Calling {name}")

            start_time = time.perf_counter()
            value = func(*args, **kwargs)
            run_time = time.perf_counter() - start_time

            t_logger.info(f"Finished {name} Elapsed time: {run_time:.8f} s")
            return value

        return log_time

    return inner_func
