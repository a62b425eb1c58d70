"""Connection profile built from a discovered PC address."""

from dataclasses import dataclass

DEFAULT_PROFILE_NAME = "Lunar PC"

# Default VNC port
DEFAULT_VNC_PORT = 5900


@dataclass
class ConnectionProfile:
    """Connection target for a discovered PC."""
    name: str
    host: str
    port: int = DEFAULT_VNC_PORT

    @classmethod
    def from_address(
        cls,
        address: str,
        name: str = DEFAULT_PROFILE_NAME,
        port: int = DEFAULT_VNC_PORT,
    ) -> "ConnectionProfile":
        return cls(name=name, host=address, port=port)

    @property
    def vnc_uri(self) -> str:
        """VNC URI for the profile."""
        return f"vnc://{self.host}:{self.port}"

    def to_dict(self) -> dict:
        return {"name": self.name, "host": self.host, "port": self.port}

    def __str__(self) -> str:
        return f"{self.name} at {self.vnc_uri}"
