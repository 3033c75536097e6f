"""
JSON export for AddrLens
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..models import AddressDetail
from .. import __version__


class JsonExporter:
    """
    Export lookup results to JSON format.

    Output format is designed to be both human-readable
    and machine-parseable.
    """

    def __init__(self, backend: str = "system"):
        self.backend = backend

    def export(self, target: str, details: list[AddressDetail],
               output_path: Optional[Path] = None) -> dict:
        """
        Export lookup results to JSON.

        Args:
            target: Target as given by the user
            details: Lookup results
            output_path: Optional file path to write

        Returns:
            JSON-serializable dict
        """
        data = {
            "meta": {
                "version": __version__,
                "generator": "AddrLens",
                "backend": self.backend,
                "generated_at": datetime.now().isoformat()
            },
            "target": target,
            "addresses": [self._serialize_detail(d) for d in details],
        }

        if output_path:
            self._write_file(data, output_path)

        return data

    def _serialize_detail(self, detail: AddressDetail) -> dict:
        """Serialize a single address record"""
        return {
            "address": detail.ip,
            "version": detail.version,
            "is_private": detail.is_private,
            "is_loopback": detail.is_loopback,
            "is_ipv4": detail.is_ipv4,
            "is_ipv6": detail.is_ipv6,
            "hostnames": list(detail.hostnames),
            "reverse_names": list(detail.reverse_names),
            "common_uses": list(detail.common_uses),
        }

    def _write_file(self, data: dict, path: Path):
        """Write JSON to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
