"""JSON report generator for discovery outcomes.

Builds the flow JSON envelope printed by the CLI and optional report files.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..discovery.outcome import DiscoveryOutcome
from ..discovery.profile import ConnectionProfile


class JsonReporter:
    """Generates JSON reports from discovery outcomes."""

    COMMAND = "discover"

    def generate(
        self,
        outcome: DiscoveryOutcome,
        port: int,
        duration_ms: int = 0,
        profile: Optional[ConnectionProfile] = None,
    ) -> dict[str, Any]:
        """Generate a report from a discovery outcome.

        Args:
            outcome: Result of the discovery attempt.
            port: UDP port the probe was sent to.
            duration_ms: Attempt duration in milliseconds.
            profile: Connection profile built from the discovered address.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        found = outcome.success
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": "found" if found else "failed",
            "address": outcome.address if found else None,
            "reason": None if found else outcome.reason,
            "port": port,
            "duration_ms": duration_ms,
            "profile": profile.to_dict() if profile and found else None,
        }

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report dictionary.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def to_json_string(self, output: dict[str, Any], pretty: bool = False) -> str:
        if pretty:
            return json.dumps(output, indent=2, ensure_ascii=False)
        return json.dumps(output, ensure_ascii=False)

    def generate_flow_output(
        self,
        report: dict[str, Any],
        report_path: Optional[str] = None,
    ) -> dict[str, Any]:
        """Generate flow CLI compatible JSON output.

        Follows the flow JSON output standard:
        {
            "success": bool,
            "command": "discover",
            "data": { ... },
            "message": str
        }
        """
        found = report["status"] == "found"

        data: dict[str, Any] = {
            "port": report["port"],
            "duration_ms": report["duration_ms"],
        }
        if found:
            data["address"] = report["address"]
            if report.get("profile"):
                data["profile"] = report["profile"]
        if report_path:
            data["report_path"] = report_path

        message = f"Found PC at {report['address']}" if found else report["reason"]

        return {
            "success": found,
            "command": self.COMMAND,
            "data": data,
            "message": message,
        }


def error_output(message: str, **extra) -> dict[str, Any]:
    """Flow JSON envelope for an error raised before discovery ran."""
    return {
        "success": False,
        "command": JsonReporter.COMMAND,
        "data": extra or None,
        "message": message,
    }
