import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Optional

from .configs import FetchAXConfig, fetchax_config

request_id_var: ContextVar[Optional[str]] = ContextVar("fetchax_request_id", default=None)


def request_id_generator() -> str:
    return str(uuid.uuid4().hex)


def init_logging(config: FetchAXConfig | None = None) -> None:
    config = config or fetchax_config

    sh = logging.StreamHandler(sys.stdout)
    sh.addFilter(RequestIdFilter())

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFORMAT,
        handlers=[sh],
        force=True,
    )

    apply_request_id_formatter(config)


class RequestIdFilter(logging.Filter):
    # Exposes the id of the request dispatched in the current task to the
    # log format.
    def filter(self, record):
        record.request_id = request_id_var.get()
        return True


class RequestIdFormatter(logging.Formatter):
    def format(self, record):
        if not getattr(record, "request_id", None):
            record.request_id = "-"
        return super().format(record)


def apply_request_id_formatter(config: FetchAXConfig | None = None):
    config = config or fetchax_config
    for handler in logging.root.handlers:
        if handler.formatter:
            handler.formatter = RequestIdFormatter(config.LOG_FORMAT, config.LOG_DATEFORMAT)
