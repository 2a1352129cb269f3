from __future__ import annotations

import secrets


class HexTokenIdProvider:
    def __init__(self, num_bytes: int = 4) -> None:
        self._num_bytes = num_bytes

    def generate(self) -> str:
        return secrets.token_hex(self._num_bytes)
