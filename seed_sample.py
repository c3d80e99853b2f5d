#!/usr/bin/env python3
"""
Create the completion index and load the sample product titles
"""

import logging
from completion_suggester.client import connect, seed_sample_index
from completion_suggester.config.settings import settings

if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    with connect(settings.elasticsearch_host, settings.elasticsearch_port, settings.elasticsearch_scheme) as handle:
        count = seed_sample_index(handle, settings.completion_index, settings.completion_field)
        print(f"Indexed {count} documents into {settings.completion_index}")
