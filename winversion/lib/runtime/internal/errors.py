from typing import Optional

class HostQueryFailure(OSError):
    def __init__(self, api: str, status: Optional[int] = None, reason: Optional[str] = None) -> None:
        self.api = api
        self.status = status
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        msg = f"Call to `{self.api}` failed"
        if self.status is not None:
            msg += f" (status 0x{self.status & 0xFFFFFFFF:08X})"
        if self.reason:
            msg += f": {self.reason}"
        return msg
