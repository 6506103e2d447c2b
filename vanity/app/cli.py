"""Command-line entry point: `vanity-server` / `python -m vanity`."""
from __future__ import annotations

import argparse
from typing import Any, Sequence

import uvicorn
from loguru import logger

from vanity.app.config.settings import Settings
from vanity.app.core import SERVICE_NAME
from vanity.app.core.logging import configure_logging
from vanity.app.main import create_app


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="vanity-server", description="Serve go-import metadata pages.")
    ap.add_argument("--serve", help="Listen address host:port (default 127.0.0.1:443)")
    ap.add_argument("--cert", help="TLS certificate file (default ./server.crt)")
    ap.add_argument("--key", help="TLS key file (default ./server.key)")
    ap.add_argument("--config", help="Metadata configuration JSON file (default ./config.json)")
    ap.add_argument("--no-tls", action="store_true", help="Serve plain HTTP (e.g. behind a TLS-terminating proxy)")
    return ap


def settings_from_args(argv: Sequence[str] | None = None, base: Settings | None = None) -> Settings:
    """Flags given on the command line override settings from the environment."""
    args = build_parser().parse_args(argv)
    settings = base or Settings()
    overrides: dict[str, Any] = {}
    if args.serve is not None:
        overrides["serve"] = args.serve
    if args.cert is not None:
        overrides["cert_file"] = args.cert
    if args.key is not None:
        overrides["key_file"] = args.key
    if args.config is not None:
        overrides["config_path"] = args.config
    if args.no_tls:
        overrides["tls_enabled"] = False
    return settings.model_copy(update=overrides)


def main(argv: Sequence[str] | None = None) -> None:
    settings = settings_from_args(argv)
    configure_logging(settings.log_level)

    tls: dict[str, Any] = {}
    if settings.tls_enabled:
        tls = {"ssl_certfile": settings.cert_file, "ssl_keyfile": settings.key_file}

    _log(
        "server_configured",
        serve=settings.serve,
        config=settings.config_path,
        tls=settings.tls_enabled,
        reload_trigger=settings.reload_trigger,
    )
    try:
        uvicorn.run(
            create_app(settings),
            host=settings.listen_host,
            port=settings.listen_port,
            log_level=settings.log_level.lower(),
            **tls,
        )
    except KeyboardInterrupt:
        _log("server_interrupted")
    except Exception as e:
        logger.exception("server failed: {}", e)
        raise


if __name__ == "__main__":
    main()
