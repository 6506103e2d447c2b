"""Settings for the vanity import server."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    serve: str = Field("127.0.0.1:443", validation_alias="VANITY_SERVE")
    cert_file: str = Field("./server.crt", validation_alias="VANITY_CERT_FILE")
    key_file: str = Field("./server.key", validation_alias="VANITY_KEY_FILE")
    tls_enabled: bool = Field(True, validation_alias="VANITY_TLS_ENABLED")

    config_path: str = Field("./config.json", validation_alias="VANITY_CONFIG")
    metadata_backend: str = Field("json", validation_alias="VANITY_METADATA_BACKEND")

    reload_trigger: str = Field("signal", validation_alias="VANITY_RELOAD_TRIGGER")
    reload_signal: str = Field("SIGUSR1", validation_alias="VANITY_RELOAD_SIGNAL")
    reload_poll_interval_seconds: float = Field(5.0, validation_alias="VANITY_RELOAD_POLL_INTERVAL_SECONDS")

    log_level: str = Field("INFO", validation_alias="VANITY_LOG_LEVEL")

    @property
    def listen_host(self) -> str:
        return parse_listen_address(self.serve)[0]

    @property
    def listen_port(self) -> int:
        return parse_listen_address(self.serve)[1]


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split "host:port" ("[::1]:443", ":443") into its parts. An empty host listens on all interfaces."""
    host, sep, port = address.strip().rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address: {address!r}")
    port_number = int(port)
    if not 0 < port_number < 65536:
        raise ValueError(f"Invalid listen port: {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host or "0.0.0.0", port_number
