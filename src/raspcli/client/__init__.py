"""HTTP client module for raspcli.

Provides :class:`ScheduleClient`, a blocking client for the Yandex Rasp
schedule-search endpoint backed by :class:`httpx.Client`.

Example::

    from raspcli.client import ScheduleClient

    with ScheduleClient(config.request, api_key) as client:
        payload = client.search("c172", "c2", "2024-05-01")
"""

from raspcli.client.schedule_client import ScheduleClient

__all__ = ["ScheduleClient"]
