"""
Simple TCP REPL server for Linsl.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(define x 1)"}
- Response: {"ok": true, "result": <printed value or null>}
            or {"ok": false, "error": <message>, "kind": <error class>}

A single Interpreter is shared by all clients so that definitions persist across
requests; evaluation is serialized with a lock.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from typing import Any, Optional, Tuple

from linsl.config import Settings, load_settings
from linsl.errors import LinslError
from linsl.interpreter import Interpreter
from linsl.printer import to_string


class ReplServer:
    def __init__(self, host: Optional[str] = None, port: Optional[int] = None, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else load_settings()
        self.host = host or self.settings.repl_host
        self.port = port or self.settings.repl_port
        self.interp = Interpreter(self.settings)
        self._lock = threading.Lock()
        self._logger = logging.getLogger("ReplServer")

    def handle_request(self, line: bytes) -> dict[str, Any]:
        """Turn one request line into a response object."""
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}", "kind": "RequestError"}
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "error": f"Unknown cmd: {cmd}", "kind": "RequestError"}

        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": f"code must be a string, found {type(code).__name__}", "kind": "RequestError"}
        with self._lock:
            try:
                result = self.interp.eval(code)
            except (LinslError, RecursionError) as ex:
                self._logger.debug("eval failed: %s", ex)
                return {"ok": False, "error": str(ex), "kind": type(ex).__name__}
        return {"ok": True, "result": None if result is None else to_string(result)}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            self._logger.info("listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        self._logger.debug("client connected: %s", addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        self._logger.debug("client disconnected: %s", addr)


if __name__ == "__main__":
    ReplServer().serve_forever()
