import pytest
import asyncio
import os
import signal
from unittest.mock import MagicMock

from tcpping.errors import SignalHandlerInstallError
from tcpping.signals import StopSignal, install_stop_handler, remove_stop_handler


def test_stop_signal_is_monotonic():
    stop = StopSignal()
    assert not stop.is_set()
    stop.set()
    stop.set()
    assert stop.is_set()


@pytest.mark.asyncio
async def test_sigint_sets_flag():
    loop = asyncio.get_running_loop()
    stop = StopSignal()
    install_stop_handler(stop, loop)
    try:
        os.kill(os.getpid(), signal.SIGINT)
        for _ in range(50):
            if stop.is_set():
                break
            await asyncio.sleep(0.01)
    finally:
        remove_stop_handler(loop)
    assert stop.is_set()


@pytest.mark.parametrize("error", [NotImplementedError(), RuntimeError("not main thread"), ValueError("bad signal")])
def test_install_failure_is_fatal(error):
    loop = MagicMock()
    loop.add_signal_handler.side_effect = error
    with pytest.raises(SignalHandlerInstallError, match="Ctrl-C") as exc_info:
        install_stop_handler(StopSignal(), loop)
    assert exc_info.value.__cause__ is error


def test_remove_without_install_is_quiet():
    loop = MagicMock()
    loop.remove_signal_handler.side_effect = NotImplementedError()
    remove_stop_handler(loop)
