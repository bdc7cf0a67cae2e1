import asyncio
import logging
import signal
import threading

from .errors import SignalHandlerInstallError

logger = logging.getLogger(__name__)

class StopSignal:
    """Monotonic stop flag: set once by the interrupt handler, read by the probe loop."""

    def __init__(self):
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

def install_stop_handler(stop: StopSignal, loop: asyncio.AbstractEventLoop) -> None:
    try:
        loop.add_signal_handler(signal.SIGINT, stop.set)
    except (NotImplementedError, RuntimeError, ValueError) as e:
        raise SignalHandlerInstallError() from e
    logger.debug("SIGINT handler installed")

def remove_stop_handler(loop: asyncio.AbstractEventLoop) -> None:
    try:
        loop.remove_signal_handler(signal.SIGINT)
    except (NotImplementedError, RuntimeError, ValueError):
        logger.debug("SIGINT handler was not installed")
