"""Concurrent TCP connect scanner."""

import logging
import queue
import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from .models import ScanResult, ScanTarget, validate_port
from .probe import DEFAULT_BANNER_TIMEOUT, probe
from .targets import normalize_host

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0
DEFAULT_WORKERS = 100


def unique_ports(ports: Iterable[int]) -> list[int]:
    """Validate ports and drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(validate_port(port) for port in ports))


class TCPScanner:
    """Probe many ports of one host with a fixed pool of worker threads."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = DEFAULT_WORKERS,
        banner_timeout: float = DEFAULT_BANNER_TIMEOUT,
    ):
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        if banner_timeout <= 0:
            raise ValueError(f"banner_timeout must be positive, got {banner_timeout}")
        self.timeout = timeout
        self.max_workers = max_workers
        self.banner_timeout = banner_timeout

    def scan_port(self, host: str, port: int) -> ScanResult:
        """Probe a single port."""
        target = ScanTarget(host=normalize_host(host), port=port)
        return probe(target.host, target.port, self.timeout, self.banner_timeout)

    def scan_ports(
        self,
        host: str,
        ports: Iterable[int],
        cancel_event: threading.Event | None = None,
    ) -> list[ScanResult]:
        """
        Probe every distinct port and block until all workers finish.

        Results come back in completion order. When ``cancel_event`` is set,
        workers stop taking new ports; ports already being probed still
        finish and are included.
        """
        host = normalize_host(host)
        port_list = unique_ports(ports)
        if not port_list:
            return []

        jobs: queue.Queue[ScanTarget] = queue.Queue()
        for port in port_list:
            jobs.put(ScanTarget(host=host, port=port))

        results: list[ScanResult] = []
        lock = threading.Lock()

        def worker() -> None:
            while cancel_event is None or not cancel_event.is_set():
                try:
                    target = jobs.get_nowait()
                except queue.Empty:
                    return
                result = probe(target.host, target.port, self.timeout, self.banner_timeout)
                with lock:
                    results.append(result)

        workers = min(self.max_workers, len(port_list))
        logger.info("Scanning %d ports on %s with %d workers", len(port_list), host, workers)
        started = time.perf_counter()
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="netprobe") as pool:
            futures = [pool.submit(worker) for _ in range(workers)]
            for future in futures:
                future.result()

        elapsed = time.perf_counter() - started
        open_count = sum(1 for result in results if result.is_open)
        logger.info(
            "Scan of %s finished in %.2fs: %d/%d ports open",
            host,
            elapsed,
            open_count,
            len(results),
        )
        return results


def scan_ports(
    host: str,
    ports: Iterable[int],
    timeout: float = DEFAULT_TIMEOUT,
    workers: int = DEFAULT_WORKERS,
) -> list[ScanResult]:
    """Scan ports on host with a throwaway TCPScanner."""
    return TCPScanner(timeout=timeout, max_workers=workers).scan_ports(host, ports)
