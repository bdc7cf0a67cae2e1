import asyncio
import os
import time
from typing import Awaitable, Callable, Optional

from .destination import ResolvedTarget
from .signals import StopSignal
from .stats import Attempt, RunStatistics

Connector = Callable[[ResolvedTarget, float], Awaitable[float]]

async def tcp_connect(target: ResolvedTarget, timeout: float) -> float:
    """Open one TCP connection and return the connect time in milliseconds."""
    start = time.perf_counter()
    _, writer = await asyncio.wait_for(
        asyncio.open_connection(*target.sockaddr, family=target.family),
        timeout,
    )
    elapsed = (time.perf_counter() - start) * 1000.0
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass
    return elapsed

def describe_error(exc: BaseException) -> str:
    if isinstance(exc, asyncio.TimeoutError):
        return "connection timed out"
    if isinstance(exc, OSError):
        # asyncio stores "Connect call failed (...)" in strerror
        if isinstance(exc.errno, int):
            return os.strerror(exc.errno)
        if exc.strerror:
            return exc.strerror
    return str(exc) or type(exc).__name__

def format_attempt(target: ResolvedTarget, attempt: Attempt) -> str:
    if attempt.ok:
        return (f"Connected to {target.display}:{target.port}, "
                f"tcp_seq={attempt.seq} time={attempt.latency_ms:.3f} ms")
    return f"Failed to connect to {target.display}:{target.port}, tcp_seq={attempt.seq} {attempt.error}"

async def probe_loop(
    target: ResolvedTarget,
    stop: StopSignal,
    count: Optional[int] = None,
    connector: Connector = tcp_connect,
    timeout: float = 1.0,
    interval: float = 1.0,
    emit: Callable[[str], None] = print,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> RunStatistics:
    """
    Sequential timed connects until the stop flag is set or count attempts are done.

    The flag is only read between attempts, so an interrupt arriving mid-connect
    lets that attempt finish first. Per-attempt errors are recorded and never
    raised.
    """
    stats = RunStatistics()
    seq = 0
    while not stop.is_set():
        if count is not None and seq >= count:
            break

        try:
            latency = await connector(target, timeout)
        except (OSError, asyncio.TimeoutError) as e:
            attempt = Attempt(seq=seq, error=describe_error(e))
        else:
            attempt = Attempt(seq=seq, latency_ms=latency)
        stats.record(attempt)
        emit(format_attempt(target, attempt))

        seq += 1
        if stop.is_set() or (count is not None and seq >= count):
            break
        await sleep(interval)

    return stats
