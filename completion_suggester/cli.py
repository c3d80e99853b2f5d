import logging
from typing import Callable

from .client import render, suggest
from .config.settings import settings
from .services.elasticsearch_service import ElasticsearchService

logger = logging.getLogger(__name__)

PROMPT = "enter keyword to complete:"
EXIT_SENTINEL = "exit"
SEPARATOR = "--------"


def run_interactive(
    handle: ElasticsearchService,
    index: str,
    field: str,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Read prefixes until `exit` or end of input, printing each batch.

    The handle is released before returning, also when a request fails.
    Returns the number of completion requests issued.
    """
    issued = 0
    with handle:
        while True:
            try:
                text = read(PROMPT)
            except EOFError:
                break
            if text == EXIT_SENTINEL:
                break
            response = suggest(
                handle, index, field, text,
                skip_duplicates=settings.completion_skip_duplicates,
                max_results=settings.max_autocomplete_results,
            )
            issued += 1
            for line in render(response):
                write(line)
            write("")
            write(SEPARATOR)
            write("")
    return issued


def main() -> int:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    handle = ElasticsearchService()
    try:
        run_interactive(handle, settings.completion_index, settings.completion_field)
    except Exception:
        logger.exception("Completion session aborted")
        return 1
    return 0
