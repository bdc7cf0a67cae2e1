import asyncio
import logging
from typing import Callable, Optional

from .config import Settings
from .destination import Destination, ResolvedTarget
from .latency import Connector, probe_loop, tcp_connect
from .resolver import precheck, resolve
from .signals import StopSignal, install_stop_handler, remove_stop_handler
from .stats import RunStatistics, format_summary, summarize

logger = logging.getLogger(__name__)

class TcpPinger:
    def __init__(
        self,
        destination: Destination,
        settings: Optional[Settings] = None,
        connector: Connector = tcp_connect,
        out: Callable[[str], None] = print,
    ):
        self.destination = destination
        self.settings = settings or Settings()
        self.connector = connector
        self.out = out
        self._target: Optional[ResolvedTarget] = None

    async def resolve(self) -> ResolvedTarget:
        if self._target is None:
            self._target = await resolve(self.destination)
        return self._target

    def _header(self, target: ResolvedTarget) -> str:
        if self.destination.host_is_ip:
            return f"TCP PING {target.display}:{target.port}"
        return f"TCP PING {self.destination.host} {target.display}:{target.port}"

    async def run(self, count: Optional[int] = None, stop: Optional[StopSignal] = None) -> RunStatistics:
        """
        Probe the destination and print per-attempt lines plus a summary.

        Args:
            count: Stop after this many attempts, None runs until interrupted
            stop: Flag to terminate the loop, a fresh one is created if omitted

        Returns:
            The accumulated statistics of the run

        Raises:
            ResolutionError, AddressFamilyUnsupportedError: destination unusable
            NetworkUnreachableError: the pre-check connection failed
            SignalHandlerInstallError: SIGINT cannot be trapped
        """
        target = await self.resolve()

        if self.settings.fail_fast_precheck:
            await precheck(target, self.settings.precheck_timeout)

        self.out(self._header(target))

        if stop is None:
            stop = StopSignal()
        loop = asyncio.get_running_loop()
        install_stop_handler(stop, loop)
        try:
            stats = await probe_loop(
                target,
                stop,
                count=count,
                connector=self.connector,
                timeout=self.settings.connect_timeout,
                interval=self.settings.interval,
                emit=self.out,
            )
        finally:
            remove_stop_handler(loop)

        summary = summarize(stats)
        if summary is not None:
            for line in format_summary(self.destination.host, summary):
                self.out(line)
        logger.debug("run finished: %d sent, %d received", stats.packets_sent, stats.packets_received)
        return stats
