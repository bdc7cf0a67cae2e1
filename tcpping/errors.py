class TcpPingError(Exception):
    """Setup-phase failure that aborts the whole run."""

class ResolutionError(TcpPingError):
    def __init__(self, host: str):
        super().__init__(f"{host}: Name or service not known")
        self.host = host

class AddressFamilyUnsupportedError(TcpPingError):
    def __init__(self, host: str):
        super().__init__(f"{host}: Address family for hostname not supported")
        self.host = host

class NetworkUnreachableError(TcpPingError):
    def __init__(self):
        super().__init__("connect: Network is unreachable")

class SignalHandlerInstallError(TcpPingError):
    def __init__(self):
        super().__init__("Error setting Ctrl-C handler")
